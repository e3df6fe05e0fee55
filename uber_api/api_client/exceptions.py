from typing import Any

__all__ = ["ApiException", "DecodeError", "TransportError"]


class ApiException(ValueError):
    def __init__(self, obj: Any, status: int):
        self.status = status
        super().__init__(obj)

    def __str__(self):
        return f"{int(self.status)}: {super().__str__()}"


class DecodeError(ApiException):
    """A successful response with a body that could not be decoded"""


class TransportError(Exception):
    """The request did not result in an HTTP response (connection error, timeout)"""
