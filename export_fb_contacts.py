"""
export_fb_contacts.py

Turn a saved Facebook friends page (fb_contacts.html) into a COSY import
file of `facebook_id;name` lines (fb_cosy_contacts.csv). Facebook IDs are
taken from the profile link where possible, otherwise looked up on
lookup-id.com and cached in facebook_id_cache.csv, which must already exist.
"""

import argparse
from collections import namedtuple
import logging
from os import path

from fb_contacts_page import ContactsPageSchema
from fb_id_cache import ID_CACHE, FacebookIdCache
from fb_id_resolver import FacebookIdResolver
from loggers.papertrail_logger import (
    LOGGER_NAME,
    close_logger,
    get_logger,
    parse_destination,
)
from lookup_id_client import LookupIdClient
from transliterate import transliterate

CONTACTS_HTML = "fb_contacts.html"
ID_EXPORT = "fb_cosy_contacts.csv"

Contact = namedtuple("Contact", ["link", "facebook_id", "name"])

logger = logging.getLogger(LOGGER_NAME)


def export_cosy(contacts_filename=CONTACTS_HTML, cache_filename=ID_CACHE,
                output_filename=ID_EXPORT, lookup_client=None, schema=None):
    """
    Build the contact list from `contacts_filename` and write it out to
    `output_filename`. Nothing is written out unless every contact resolves.
    """
    id_cache = FacebookIdCache.load(cache_filename)

    with open(contacts_filename, encoding="utf-8") as infile:
        document = infile.read()

    if lookup_client is None:
        with LookupIdClient() as lookup_client:
            resolver = FacebookIdResolver(id_cache, lookup_client)
            contacts = load_contacts(document, resolver, schema)
    else:
        resolver = FacebookIdResolver(id_cache, lookup_client)
        contacts = load_contacts(document, resolver, schema)

    logger.info("{} records loaded.".format(len(contacts)))

    export_contacts(contacts, output_filename)

    logger.info("File '{}' is ready.".format(output_filename))
    return contacts


def load_contacts(document, resolver, schema=None):
    """Return a list of Contacts, in the order they appear in `document`."""
    schema = schema or ContactsPageSchema()
    contacts = []

    for fragment in schema.find_contacts(document):
        link = schema.extract_link(fragment)
        if link is None:
            continue

        facebook_id = resolver.resolve(link)
        name = transliterate(schema.extract_name(fragment))
        contacts.append(Contact(link=link, facebook_id=facebook_id, name=name))

    return contacts


def export_contacts(contacts, output_filename):
    """Overwrite `output_filename` with one `facebook_id;name` line each."""
    with open(output_filename, "w", encoding="utf-8") as outfile:
        for contact in contacts:
            outfile.write("{};{}\n".format(contact.facebook_id, contact.name))


def parse_args(argv=None):
    """
    * --papertrail: HOST:PORT of a Papertrail log destination. If absent,
                    logs only go to stdout
    *    --verbose: if present, also print how each Facebook ID was found
    """
    parser = argparse.ArgumentParser(description=\
        "Export {} to {} for COSY".format(CONTACTS_HTML, ID_EXPORT)
    )
    parser.add_argument(
        "--papertrail",
        type=parse_destination,
        default=None,
        help="Papertrail log destination as HOST:PORT"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="If True, logs DEBUG messages to stdout. Defaults to False"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    log_job_name = __file__.split(path.sep)[-1] # name of this file
    level = logging.DEBUG if args.verbose else logging.INFO
    job_logger = get_logger(log_job_name, destination=args.papertrail,
                            level=level)

    try:
        export_cosy()
    except Exception:
        job_logger.exception("Export aborted")
        raise
    finally:
        close_logger(job_logger)


if __name__ == "__main__":
    main()
