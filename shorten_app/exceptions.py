"""Exceptions raised by the shortening store.

Classes:
    ShortenerError:
        Generic base class for store-related exceptions.

    InvalidUrlError:
        Raised when a URL handed to the store is not a well-formed absolute URL.

    ShortUrlNotFoundError:
        Raised when no record matches a short id.

    LockFailureError:
        Raised when the store lock cannot be acquired.

    ShortIdGenerationError:
        Raised when no unused short id could be generated.

Example:
    >>> from shorten_app.exceptions import ShortUrlNotFoundError
    >>> raise ShortUrlNotFoundError("Short URL 'bogus12345' not found")
    Traceback (most recent call last):
        ...
    shorten_app.exceptions.ShortUrlNotFoundError: Short URL 'bogus12345' not found
"""


class ShortenerError(Exception):
    """Generic base class for store-related exceptions."""

    pass


class InvalidUrlError(ShortenerError):
    """Exception raised when the input is not a valid absolute URL."""

    pass


class ShortUrlNotFoundError(ShortenerError):
    """Exception raised when a short id has no matching record."""

    pass


class LockFailureError(ShortenerError):
    """Exception raised when the store lock could not be acquired.

    This is an internal fault, never a user input problem.
    """

    pass


class ShortIdGenerationError(ShortenerError):
    """Exception raised when every generated short id was already taken."""

    pass
