"""
fb_id_resolver.py

Resolve a Facebook profile link to its numeric Facebook ID: from the cache,
from the link itself, or by asking lookup-id.com.
"""

import logging
import re

from fb_contacts_page import FACEBOOK_LINK
from loggers.papertrail_logger import LOGGER_NAME

ID_LINK = FACEBOOK_LINK + "profile.php?id="
# eg. https://www.facebook.com/profile.php?id=100005891346250&amp;sk=friends
ID_LINK_PATTERN = re.compile(re.escape(ID_LINK) + r"(\d+)(?:&|$)")

logger = logging.getLogger(LOGGER_NAME)


def id_from_link(link):
    """Return the ID embedded in a profile.php?id= link, else None."""
    match = ID_LINK_PATTERN.match(link)
    if match:
        return match.group(1)
    return None


class FacebookIdResolver:
    """
    Resolves profile links one at a time.

    Parameters:
    * id_cache: FacebookIdCache, checked first and appended to after lookups
    * lookup_client: object with a `lookup(link)` method, eg. LookupIdClient
    """

    def __init__(self, id_cache, lookup_client):
        self.id_cache = id_cache
        self.lookup_client = lookup_client

    def resolve(self, link):
        cached_id = self.id_cache.get(link)
        if cached_id is not None:
            logger.debug("Cached ID {} for {}".format(cached_id, link))
            return cached_id

        # ids in the link need no lookup, so they aren't cached
        linked_id = id_from_link(link)
        if linked_id is not None:
            logger.debug("ID {} taken from {}".format(linked_id, link))
            return linked_id

        facebook_id = self.lookup_client.lookup(link)
        self.id_cache.append(link, facebook_id)
        return facebook_id
