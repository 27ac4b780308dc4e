"""Error taxonomy shared by services and routers.

``DashboardError`` subclasses reach the client through the exception
handlers registered in ``marketdash.main`` and render as
``{"error": ..., "details": ...}``. ``UpstreamLookupError`` is raised by the
provider lookups and never leaves the batch fan-out; single-ticker services
wrap it in ``UpstreamFetchError``.
"""


class DashboardError(Exception):
    """Base class for errors rendered as a JSON error payload."""

    status_code: int = 500

    def __init__(self, error: str, details: str | None = None):
        super().__init__(error)
        self.error = error
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class InvalidRequestError(DashboardError, ValueError):
    """The request parameters are unusable (HTTP 400)."""

    status_code = 400


class MissingInputError(InvalidRequestError):
    """No valid ticker symbol remained after parsing."""


class UpstreamFetchError(DashboardError):
    """A single-ticker provider call failed (HTTP 500)."""

    status_code = 500


class UpstreamLookupError(LookupError):
    """One provider lookup failed for one ticker."""

    def __init__(self, ticker: str, message: str):
        super().__init__(message)
        self.ticker = ticker
        self.message = message


def error_message(exc: BaseException) -> str:
    """Human-readable message for an exception: its text, else its class name."""
    message = str(exc).strip()
    return message or type(exc).__name__
