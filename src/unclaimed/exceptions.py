"""unclaimed exception hierarchy.

All public exceptions inherit from UnclaimedError, giving callers a single
base class to catch when they want to handle any scanner-specific failure
without swallowing unrelated errors.

Apart from ``ConfigError``, none of these ever reach the user: each one is
absorbed at the stage where it occurs and turns into "no finding".
"""


class UnclaimedError(Exception):
    """Base exception for all unclaimed errors."""


class URLParseError(UnclaimedError):
    """Raised when an input line is not an absolute http(s) URL.

    Covers unparseable strings, disallowed schemes, empty hosts and
    invalid ports. The classifier drops such lines silently.
    """


class FetchError(UnclaimedError):
    """Raised when the content behind a target URL cannot be downloaded.

    Covers transport failures, timeouts and non-success responses. The
    scan of that URL is abandoned; sibling URLs are unaffected.
    """


class ExtractionError(UnclaimedError):
    """Raised when fetched content cannot be interpreted.

    For example an invalid ``package.json`` body. Handled the same way
    as ``FetchError``.
    """


class ProbeError(UnclaimedError):
    """Raised when a registry existence probe fails at the transport level.

    The registry checker turns this into "not unclaimed, status 0".
    """


class ConfigError(UnclaimedError):
    """Raised for an unreadable or invalid configuration file."""
