"""Error types carrying status codes and their mapping to HTTP statuses."""

from __future__ import annotations

from http import HTTPStatus

from .enums import ErrorCode

_HTTP_BY_CODE: dict[int, HTTPStatus] = {
    ErrorCode.OK: HTTPStatus.OK,
    ErrorCode.INVALID_ARGUMENT: HTTPStatus.BAD_REQUEST,
    ErrorCode.FAILED_PRECONDITION: HTTPStatus.BAD_REQUEST,
    ErrorCode.OUT_OF_RANGE: HTTPStatus.BAD_REQUEST,
    ErrorCode.UNAUTHENTICATED: HTTPStatus.UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: HTTPStatus.FORBIDDEN,
    ErrorCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCode.CANCELED: HTTPStatus.REQUEST_TIMEOUT,
    ErrorCode.ALREADY_EXISTS: HTTPStatus.CONFLICT,
    ErrorCode.ABORTED: HTTPStatus.CONFLICT,
    ErrorCode.RESOURCE_EXHAUSTED: HTTPStatus.TOO_MANY_REQUESTS,
    ErrorCode.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorCode.DATA_LOSS: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorCode.UNKNOWN: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorCode.UNIMPLEMENTED: HTTPStatus.NOT_IMPLEMENTED,
    ErrorCode.UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
    ErrorCode.DEADLINE_EXCEEDED: HTTPStatus.GATEWAY_TIMEOUT,
}


def _code_name(code: int) -> str:
    try:
        member = ErrorCode(code)
    except ValueError:
        return f"Code({code})"
    if member is ErrorCode.OK:
        return "OK"
    return "".join(part.capitalize() for part in member.name.split("_"))


class StatusError(Exception):
    """An RPC error with a status code and a description."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message)
        self.code = int(code)
        self.message = message

    def __str__(self) -> str:
        return f"rpc error: code = {_code_name(self.code)} desc = {self.message}"


class CodeError(Exception):
    """An error with a business code and a message."""

    def __init__(self, code: int, msg: str) -> None:
        super().__init__(code, msg)
        self.code = int(code)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class ApiError(Exception):
    """An error with an HTTP status code and a message."""

    def __init__(self, code: int, msg: str) -> None:
        super().__init__(code, msg)
        self.code = int(code)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class InvalidArgumentError(CodeError):
    """A code error for invalid arguments."""

    def __init__(self, msg: str) -> None:
        super().__init__(ErrorCode.INVALID_ARGUMENT, msg)


def code_from_grpc_error(err: BaseException | None) -> HTTPStatus:
    """Map an RPC error to an HTTP status; non-RPC errors count as unknown."""
    if err is None:
        code = int(ErrorCode.OK)
    elif isinstance(err, StatusError):
        code = err.code
    else:
        code = int(ErrorCode.UNKNOWN)
    return _HTTP_BY_CODE.get(code, HTTPStatus.INTERNAL_SERVER_ERROR)


def is_grpc_error(err: BaseException | None) -> bool:
    """Return True when ``err`` is an RPC status error."""
    return isinstance(err, StatusError)