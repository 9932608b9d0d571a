"""
Custom exceptions for the response transformer.
"""

from typing import Optional


class TransformerException(Exception):
    """Base exception for all transformation errors."""

    pass


class DecodeError(TransformerException):
    """The backend payload is not valid JSON or does not match the envelope."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class EmptyResponseError(TransformerException):
    """The backend envelope decoded but contained no sub-responses."""

    pass


class EncodeError(TransformerException):
    """The public response could not be serialized."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause
