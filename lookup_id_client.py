"""
lookup_id_client.py

Look up the numeric Facebook ID behind a profile link with lookup-id.com.
"""

import logging

import requests

from loggers.papertrail_logger import LOGGER_NAME

LOOKUP_ID_URL = "https://lookup-id.com/"
# lookup-id.com turns away requests that don't look like a known http client
USER_AGENT = "PostmanRuntime/7.29.0"

BEFORE_CODE = '<span id="code">'
AFTER_CODE = "</span>"

logger = logging.getLogger(LOGGER_NAME)


class FacebookIdLookupError(Exception):
    """Raised when lookup-id.com doesn't return an ID for a link."""

    def __init__(self, link):
        self.link = link
        super().__init__("Cannot extract Facebook ID for '{}'".format(link))


class LookupIdClient:
    """
    Holds one `requests.Session` for the run. Use as a context manager, or
    call `close()` when done.
    """

    def __init__(self, session=None):
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def lookup(self, link):
        """
        Post `link` to lookup-id.com and return the Facebook ID found in the
        response page.

        Parameters:
        * link: Facebook profile link, eg. https://www.facebook.com/some.name

        Raises FacebookIdLookupError if the page has no ID; connection errors
        from requests are left to propagate.
        """
        form = {
            "fburl": link,
            "check": "Lookup",
        }
        response = self.session.post(LOOKUP_ID_URL, data=form)
        #response.raise_for_status() # error pages lack the code span anyway

        facebook_id = extract_code(response.text)
        if not facebook_id:
            raise FacebookIdLookupError(link)

        logger.info("Looked up {:>50} to {}".format(link, facebook_id))
        return facebook_id

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def extract_code(page):
    """Return the text inside the id="code" span of `page`, or None."""
    before_index = page.find(BEFORE_CODE)
    if before_index == -1:
        return None

    code_start = before_index + len(BEFORE_CODE)
    after_index = page.find(AFTER_CODE, code_start)
    if after_index == -1:
        return None

    return page[code_start:after_index].strip()
