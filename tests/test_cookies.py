"""Tests for Cookie header parsing and Set-Cookie construction."""

import pytest
from starlette.datastructures import Headers

from cookie_session.session.cookies import (
    get_value_for_cookie,
    pending_set_cookies,
    queue_set_cookie,
    session_cookie,
)


def _headers(*cookie_headers: str) -> Headers:
    return Headers(raw=[(b"cookie", h.encode()) for h in cookie_headers])


def test_finds_cookie_among_others():
    assert get_value_for_cookie(_headers("a=1; session=abc123; b=2"), "session") == "abc123"


def test_absent_when_not_present():
    assert get_value_for_cookie(_headers("a=1; b=2"), "session") is None


def test_absent_without_cookie_header():
    assert get_value_for_cookie(Headers(raw=[]), "session") is None


@pytest.mark.parametrize("first,second", [
    ("a=1", "session=xyz"),
    ("session=xyz", "a=1"),
])
def test_scans_every_header_occurrence(first, second):
    assert get_value_for_cookie(_headers(first, second), "session") == "xyz"


def test_first_match_wins():
    assert get_value_for_cookie(_headers("session=one", "session=two"), "session") == "one"


def test_name_must_match_exactly():
    headers = _headers("my_session=nope; sessionx=nope; session=yes")
    assert get_value_for_cookie(headers, "session") == "yes"


def test_whitespace_is_trimmed():
    assert get_value_for_cookie(_headers("a=1;   session =  abc  "), "session") == "abc"


def test_value_may_contain_equals_sign():
    assert get_value_for_cookie(_headers("session=a=b"), "session") == "a=b"


def test_pair_without_equals_is_ignored():
    assert get_value_for_cookie(_headers("session; other=1"), "session") is None


def test_session_cookie_attributes():
    assert session_cookie("session", "abc") == "session=abc; Path=/; Secure; HttpOnly; SameSite=strict"


def test_delete_cookie_has_empty_value():
    assert session_cookie("session") == "session=; Path=/; Secure; HttpOnly; SameSite=strict"


def test_queued_cookies_accumulate(make_request):
    request = make_request()
    queue_set_cookie(request, "a=1")
    queue_set_cookie(request, "b=2")
    assert pending_set_cookies(request) == ["a=1", "b=2"]


def test_no_pending_cookies_by_default(make_request):
    assert pending_set_cookies(make_request()) == []
