"""error types raised by the circleci client"""

import httpx


class CircleCIError(Exception):
    """base class for errors raised by this package"""


class ProjectSlugError(CircleCIError):
    """a project-scoped method was called without a project slug"""

    def __init__(self) -> None:
        super().__init__("A project slug is required to call this method")


class APIError(CircleCIError):
    """the API answered with a status other than the one the endpoint expects

    Attributes:
        message: `message` field of the error body, or a generic fallback
        status: HTTP status code received
        response: raw response, for callers that need headers or the body
    """

    def __init__(
        self,
        message: str | None,
        status: int,
        response: httpx.Response,
    ) -> None:
        self.message = message or "An API error occurred"
        self.status = status
        self.response = response
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"APIError(status={self.status}, message={self.message!r})"
