import pytest

from core.errors import InvalidUrlError
from core.services.url_validator import validate_url


def test_accepts_https_and_returns_canonical_form():
    assert validate_url("https://jsonplaceholder.typicode.com/users") == "https://jsonplaceholder.typicode.com/users"


def test_adds_root_path_to_bare_host():
    assert validate_url("https://example.com") == "https://example.com/"


def test_uppercase_scheme_and_host_are_normalized():
    assert validate_url("HTTP://Example.COM/users") == "http://example.com/users"


@pytest.mark.parametrize(
    "url",
    [
        "HTTPS://Example.com",
        "http://example.com:8080/a/../b?q=1",
        "https://example.com/users",
    ],
)
def test_validation_is_idempotent(url):
    once = validate_url(url)
    assert validate_url(once) == once


@pytest.mark.parametrize("url", ["/users", "example.com/users", "", "not a url"])
def test_relative_or_garbage_input_is_unparseable(url):
    with pytest.raises(InvalidUrlError) as excinfo:
        validate_url(url)
    assert excinfo.value.message.startswith("Invalid URL: ")
    assert "protocol" not in excinfo.value.message


def test_non_string_input_is_rejected():
    with pytest.raises(InvalidUrlError):
        validate_url(None)


@pytest.mark.parametrize("url", ["ftp://example.com/file.txt", "ws://example.com/socket"])
def test_disallowed_scheme(url):
    with pytest.raises(InvalidUrlError) as excinfo:
        validate_url(url)
    assert str(excinfo.value) == "Invalid URL: Invalid URL protocol. Only HTTP/HTTPS are allowed."
