"""Error types raised by client operations."""

from __future__ import annotations

import enum
from dataclasses import dataclass

CONNECTION_FAILED = "connection failed: "
TRANSPORT_ERROR = "transport error: "
GRPC_ERROR = "grpc error: "
INVALID_ARGUMENT = "invalid argument: "
INVALID_TIMESTAMP = "invalid timestamp: "


class StatusCode(enum.IntEnum):
    """gRPC status codes."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


@dataclass(frozen=True)
class Status:
    """A gRPC status: a code and a human-readable message."""

    code: StatusCode
    message: str = ""

    def __str__(self) -> str:
        return f"status: {self.code.name}, message: {self.message!r}"


class ClientError(Exception):
    """Base class of every error raised by client operations."""

    prefix = ""

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.prefix}{detail}")
        self._detail = detail

    def message(self) -> str:
        """Return the error message without its category prefix."""
        return self._detail

    def code(self) -> StatusCode | None:
        """Return the gRPC status code, if this is a gRPC error."""
        return None

    def status(self) -> Status | None:
        """Return the gRPC status, if this is a gRPC error."""
        return None

    def is_not_found(self) -> bool:
        return self.code() is StatusCode.NOT_FOUND

    def is_precondition_failed(self) -> bool:
        return self.code() is StatusCode.FAILED_PRECONDITION

    def is_invalid_argument(self) -> bool:
        return self.code() is StatusCode.INVALID_ARGUMENT

    def is_connection_error(self) -> bool:
        return False


class ConnectionFailedError(ClientError):
    """The connection to the server could not be established."""

    prefix = CONNECTION_FAILED

    def is_connection_error(self) -> bool:
        return True


class TransportError(ClientError):
    """A transport-level failure."""

    prefix = TRANSPORT_ERROR

    def __init__(self, source: BaseException) -> None:
        super().__init__(str(source))
        self.source = source
        self.__cause__ = source

    def is_connection_error(self) -> bool:
        return True


class GrpcError(ClientError):
    """The server answered with a non-OK gRPC status."""

    prefix = GRPC_ERROR

    def __init__(self, status: Status) -> None:
        super().__init__(str(status))
        self._status = status

    def message(self) -> str:
        return self._status.message

    def code(self) -> StatusCode | None:
        return self._status.code

    def status(self) -> Status | None:
        return self._status


class InvalidArgumentError(ClientError):
    """The caller supplied an invalid argument."""

    prefix = INVALID_ARGUMENT

    def is_invalid_argument(self) -> bool:
        return True


class InvalidTimestampError(ClientError):
    """A timestamp could not be parsed."""

    prefix = INVALID_TIMESTAMP


def from_status(status: Status) -> GrpcError:
    """Wrap a gRPC status in a client error."""
    return GrpcError(status)