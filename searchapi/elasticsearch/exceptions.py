"""
Custom exceptions for the search backend client.
"""

from typing import Optional


class ElasticsearchException(Exception):
    """Search backend request errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SigningException(ElasticsearchException):
    """A request could not be signed."""

    pass
