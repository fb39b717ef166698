"""Exceptions raised by the ClickUp client."""

from typing import Optional

from taskmaster.exceptions.base import TaskmasterError


class UpstreamError(TaskmasterError):
    """Non-success response (or transport failure) from the ClickUp API.

    The status code and the raw response body are kept verbatim.
    """

    default_code = "UPSTREAM_ERROR"

    def __init__(self, status_code: Optional[int], body: str, code: Optional[str] = None):
        status_text = str(status_code) if status_code is not None else "unreachable"
        super().__init__(
            message=f"ClickUp API error: {status_text} {body}",
            code=code,
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body
