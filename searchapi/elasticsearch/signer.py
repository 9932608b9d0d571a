"""
AWS SigV4 request signing for managed search backends.
"""

import logging
from typing import Dict, Optional

import boto3
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from .exceptions import SigningException

logger = logging.getLogger(__name__)


class RequestSigner:
    """
    Signs backend requests with AWS SigV4.

    Credentials are resolved through the default boto3 chain unless given
    explicitly.
    """

    def __init__(self, region: str, service: str = "es", credentials: Optional[Credentials] = None):
        self.region = region
        self.service = service

        if credentials is None:
            credentials = boto3.Session().get_credentials()
        if credentials is None:
            raise SigningException("No AWS credentials available for request signing")
        self.credentials = credentials

    def sign(self, method: str, url: str, body: Optional[bytes] = None, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """
        Sign a request.

        Args:
            method: HTTP method
            url: Full request URL
            body: Request body, signed as sent
            headers: Headers to include in the signature

        Returns:
            The given headers plus the signature headers
        """
        request = AWSRequest(method=method, url=url, data=body or b"", headers=dict(headers or {}))
        try:
            SigV4Auth(self.credentials.get_frozen_credentials(), self.service, self.region).add_auth(request)
        except Exception as e:
            logger.error(f"Failed to sign {method} request to {url}: {e}")
            raise SigningException(f"Failed to sign request: {e}") from e
        return dict(request.headers.items())
