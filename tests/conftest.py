"""Shared fixtures: cache files on disk and stub lookup clients."""

import logging

import pytest

from fb_id_cache import CACHE_HEADERS, FacebookIdCache
from loggers.papertrail_logger import LOGGER_NAME, close_logger

CONTACT_MARKER = (
    '<div data-visualcompletion="ignore-dynamic" '
    'style="padding-left: 8px; padding-right: 8px;">'
)


def contact_html(link, name):
    """One contact block the way the friends page renders it."""
    return (
        '<a href="{}" role="link" tabindex="0">'
        '<svg aria-label="{}" role="img"></svg></a>'.format(link, name)
    )


class StubLookupClient:
    """Returns canned ids and records every link it was asked about."""

    def __init__(self, ids=None):
        self.ids = ids or {}
        self.calls = []

    def lookup(self, link):
        self.calls.append(link)
        return self.ids[link]


class FailingLookupClient:
    def lookup(self, link):
        pytest.fail("Unexpected lookup for {}".format(link))


@pytest.fixture()
def cache_file(tmp_path):
    """Cache file with a header and one cached vanity link."""
    path = tmp_path / "facebook_id_cache.csv"
    path.write_text(
        ",".join(CACHE_HEADERS) + "\r\n"
        "https://www.facebook.com/maria.ivanova,100000000000042",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def id_cache(cache_file):
    return FacebookIdCache.load(str(cache_file))


@pytest.fixture()
def failing_lookup():
    return FailingLookupClient()


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo whatever get_logger did to the shared logger."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    close_logger(logger)
    for log_filter in list(logger.filters):
        logger.removeFilter(log_filter)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
