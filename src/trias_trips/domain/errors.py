"""Errors raised while fetching trips.

Configuration, transport and protocol failures are reported to the caller.
Missing fields inside an otherwise well-formed response are not errors; the
parser degrades them to ``None`` instead.
"""


class TripFetchError(Exception):
    """Base class for errors reported by a fetch cycle."""


class ConfigurationError(TripFetchError):
    """Required configuration (endpoint or stop references) is missing."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing {'/'.join(missing)}")


class TriasTransportError(TripFetchError):
    """The request could not be sent or timed out."""


class TriasHttpError(TripFetchError):
    """The endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class ResponseParseError(TripFetchError):
    """The response body is not well-formed XML."""
