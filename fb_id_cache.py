"""
fb_id_cache.py

On-disk cache of Facebook profile link -> Facebook ID, so links resolved by
lookup-id.com are not looked up again on later runs. The file is a two
column csv (link, facebook id) that is only ever appended to.
"""

import csv
import logging
import os

from loggers.papertrail_logger import LOGGER_NAME

ID_CACHE = "facebook_id_cache.csv"
CACHE_HEADERS = ["Link", "FacebookId"]

logger = logging.getLogger(LOGGER_NAME)


class IdCacheError(Exception):
    """Raised when a row of the cache file can't be parsed."""


class FacebookIdCache:
    """In-memory view of the cache file, appending back to it on `append`.

    When the file holds the same link more than once, the last row wins.
    """

    def __init__(self, filename, entries=None):
        self.filename = filename
        self._ids = dict(entries or {})

    @classmethod
    def load(cls, filename=ID_CACHE):
        """Read the whole cache file. The file has to exist, even if empty."""
        entries = dict()

        with open(filename, newline="", encoding="utf-8") as infile:
            reader = csv.reader(infile)
            for row in reader:
                if not row or not "".join(row).strip():
                    continue
                if reader.line_num == 1 and row == CACHE_HEADERS:
                    continue
                if len(row) != 2 or not row[0] or not row[1]:
                    raise IdCacheError("Malformed row in {} at line {}: {}".format(
                        filename, reader.line_num, row
                    ))
                link, facebook_id = row
                entries[link] = facebook_id.strip()

        logger.debug("Loaded {} cached Facebook IDs from {}".format(
            len(entries), filename
        ))
        return cls(filename, entries)

    def get(self, link):
        return self._ids.get(link)

    def append(self, link, facebook_id):
        """Add a row to the end of the cache file and to the in-memory map."""
        needs_line_break = _missing_trailing_newline(self.filename)

        with open(self.filename, "a", newline="", encoding="utf-8") as outfile:
            if needs_line_break:
                outfile.write("\r\n")
            writer = csv.writer(outfile)
            writer.writerow([link, facebook_id])

        self._ids[link] = facebook_id

    def __contains__(self, link):
        return link in self._ids

    def __len__(self):
        return len(self._ids)


def _missing_trailing_newline(filename):
    """True if `filename` has content that doesn't end in a line break."""
    if not os.path.getsize(filename):
        return False

    with open(filename, "rb") as infile:
        infile.seek(-1, os.SEEK_END)
        return infile.read(1) not in (b"\n", b"\r")
