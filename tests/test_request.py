import pytest
from uriquery import (
    STAR,
    AbsolutePath,
    AbsoluteUri,
    Authority,
    Query,
    Request,
    parse,
)


@pytest.mark.parametrize(
    "target",
    [
        AbsoluteUri.from_string(
            "http://www.foo.bar/query/test?foo=bar&message=hello&message=world"
        ),
        AbsolutePath("/query/test?foo=bar&message=hello&message=world"),
    ],
)
def test_splits_and_parses(target):
    query = parse(target)
    assert query.get("foo") == ("bar",)
    assert query.get_or("foo", "other") == ["bar"]
    assert query.get_or("bar", "other") == ["other"]
    assert query.get("message") == ("hello", "world")
    assert query.get("bar") is None


def test_forms_agree():
    raw = "/query/test?foo=bar&message=hello&message=world"
    assert parse(AbsolutePath(raw)) == parse(
        AbsoluteUri.from_string(f"http://www.foo.bar{raw}")
    )


def test_no_query():
    assert parse(STAR) == Query()
    assert parse(Authority("host.com")) == Query()
    assert parse(AbsolutePath("/query/test")) == Query()
    assert parse(AbsolutePath("relative?foo=bar")) == Query()


def test_request_parses_once():
    request = Request("/query/test?foo=bar")
    assert type(request.target) is AbsolutePath
    query = request.query
    assert query.get("foo") == ("bar",)
    assert request.query is query


def test_request_from_target():
    request = Request(Authority("host.com:443"))
    assert request.query == Query()
    assert request.query is request.query


def test_request_absolute_uri():
    request = Request("http://www.foo.bar/query/test?message=hello&message=world")
    assert request.query.get("message") == ("hello", "world")
    assert repr(request).startswith("Request(")


def test_request_path_with_empty_segments():
    assert parse(AbsolutePath("//a/b?foo=bar")).get("foo") == ("bar",)
    assert Request("//static//x?foo=bar").query.get("foo") == ("bar",)
