"""Tests for lookup_id_client, with a fake session in place of requests."""

import pytest
import requests

from lookup_id_client import (
    LOOKUP_ID_URL,
    USER_AGENT,
    FacebookIdLookupError,
    LookupIdClient,
    extract_code,
)


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeSession:
    def __init__(self, text="", error=None):
        self.headers = {}
        self.text = text
        self.error = error
        self.posts = []
        self.closed = False

    def post(self, url, data=None):
        self.posts.append((url, data))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text)

    def close(self):
        self.closed = True


RESULT_PAGE = (
    '<html><body><p>Your Facebook ID is</p>'
    '<span id="code">100000000000777</span><p>done</p></body></html>'
)


def test_lookup_posts_form_and_parses_code():
    session = FakeSession(RESULT_PAGE)
    client = LookupIdClient(session)

    assert client.lookup("https://www.facebook.com/ivan.petrov") == "100000000000777"
    assert session.headers["User-Agent"] == USER_AGENT
    assert session.posts == [(
        LOOKUP_ID_URL,
        {"fburl": "https://www.facebook.com/ivan.petrov", "check": "Lookup"},
    )]


def test_lookup_without_code_names_link():
    client = LookupIdClient(FakeSession("<html>Too many requests</html>"))

    with pytest.raises(FacebookIdLookupError) as excinfo:
        client.lookup("https://www.facebook.com/ivan.petrov")
    assert excinfo.value.link == "https://www.facebook.com/ivan.petrov"
    assert "ivan.petrov" in str(excinfo.value)


def test_lookup_with_empty_code_fails():
    client = LookupIdClient(FakeSession('<span id="code"> </span>'))
    with pytest.raises(FacebookIdLookupError):
        client.lookup("https://www.facebook.com/ivan.petrov")


def test_transport_errors_propagate():
    client = LookupIdClient(FakeSession(error=requests.ConnectionError("refused")))
    with pytest.raises(requests.ConnectionError):
        client.lookup("https://www.facebook.com/ivan.petrov")


def test_context_manager_closes_session():
    session = FakeSession(RESULT_PAGE)
    with LookupIdClient(session) as client:
        client.lookup("https://www.facebook.com/ivan.petrov")
    assert session.closed


def test_default_session_is_requests_session():
    with LookupIdClient() as client:
        assert isinstance(client.session, requests.Session)
        assert client.session.headers["User-Agent"] == USER_AGENT


@pytest.mark.parametrize("page, expected", [
    ('<span id="code">123</span>', "123"),
    ('<span id="code">\n  123\n</span>', "123"),
    ('<span id="code">123', None),
    ("<span>123</span>", None),
])
def test_extract_code(page, expected):
    assert extract_code(page) == expected
