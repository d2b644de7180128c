from __future__ import annotations

from fastapi.responses import JSONResponse


class GasCalcError(Exception):
    status_code = 500
    reason = "internal_error"

    def __init__(self, message: str, received_body: dict | None = None):
        super().__init__(message)
        self.message = message
        self.received_body = received_body


class InvalidRequestError(GasCalcError):
    status_code = 400
    reason = "invalid_request"


class UpstreamError(GasCalcError):
    """Base for any failure talking to the block explorer."""

    status_code = 502
    reason = "upstream_error"


class UpstreamUnavailableError(UpstreamError):
    reason = "upstream_unavailable"


class UpstreamTimeoutError(UpstreamError):
    status_code = 504
    reason = "upstream_timeout"


class UpstreamHTTPError(UpstreamError):
    reason = "upstream_http_error"


class UpstreamResponseError(UpstreamError):
    reason = "upstream_malformed_response"


class UpstreamAPIError(UpstreamError):
    reason = "upstream_api_error"


class InvalidNumberError(UpstreamError):
    reason = "invalid_number"


def error_response(
    status_code: int,
    message: str,
    reason: str | None = None,
    received_body: dict | None = None,
) -> JSONResponse:
    content: dict = {"error": message, "reason": reason}
    if received_body is not None:
        content["received_body"] = received_body
    return JSONResponse(status_code=status_code, content=content)
