"""URL validation for the shortening store."""

import string

from pydantic import AnyUrl, TypeAdapter, ValidationError

from shorten_app.exceptions import InvalidUrlError


_url_adapter = TypeAdapter(AnyUrl)


def validate_url(value) -> str:
    """
    Check that `value` is a well-formed absolute URL with a host.

    The URL is only parsed, never normalized: the string handed in is the
    string returned, so pydantic's trailing-slash rewriting does not leak
    into stored records. Input the parser would silently repair (whitespace,
    tabs and newlines, a missing or mangled `//` after the scheme) is
    rejected rather than stored verbatim.

    Raises:
        InvalidUrlError: On non-strings, blank input, whitespace anywhere,
            missing scheme or `://`, relative paths, unparsable syntax or
            host-less URLs (mailto:, file:///).
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidUrlError(f"Invalid URL: {value!r}")

    if any(char in string.whitespace for char in value):
        raise InvalidUrlError(f"Invalid URL: {value!r} (contains whitespace)")

    try:
        parsed = _url_adapter.validate_python(value)
    except ValidationError as e:
        raise InvalidUrlError(f"Invalid URL: {value!r} ({e.errors()[0]['msg']})") from e

    if not parsed.host:
        raise InvalidUrlError(f"Invalid URL: {value!r} (missing host)")

    # The parser fills in "//" for http:example.com and https:/example.com
    if not value.partition(":")[2].startswith("//"):
        raise InvalidUrlError(f"Invalid URL: {value!r} (scheme must be followed by '://')")

    return value
