"""
Configuration for the search backend client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class ElasticsearchConfig:
    """Search backend client configuration."""

    endpoint: str
    index: str = "ons"
    doc_type: str = "_doc"
    username: Optional[str] = None
    password: Optional[str] = None
    verify_certs: bool = True
    timeout: int = 30

    # AWS SigV4 signing for managed deployments
    sign_requests: bool = False
    aws_region: str = "eu-west-1"
    aws_service: str = "es"

    @classmethod
    def from_environment(cls) -> "ElasticsearchConfig":
        """Create configuration from environment variables."""

        endpoint = os.getenv("SEARCH_ELASTICSEARCH_URL")
        if not endpoint:
            raise ValueError("SEARCH_ELASTICSEARCH_URL environment variable is required")

        return cls(
            endpoint=endpoint,
            index=os.getenv("SEARCH_ELASTICSEARCH_INDEX", "ons"),
            doc_type=os.getenv("SEARCH_ELASTICSEARCH_DOC_TYPE", "_doc"),
            username=os.getenv("SEARCH_ELASTICSEARCH_USERNAME"),
            password=os.getenv("SEARCH_ELASTICSEARCH_PASSWORD"),
            verify_certs=os.getenv("SEARCH_ELASTICSEARCH_VERIFY_CERTS", "true").lower() == "true",
            timeout=int(os.getenv("SEARCH_ELASTICSEARCH_TIMEOUT", "30")),
            sign_requests=os.getenv("SEARCH_SIGN_ELASTICSEARCH_REQUESTS", "false").lower() == "true",
            aws_region=os.getenv("SEARCH_AWS_REGION", "eu-west-1"),
            aws_service=os.getenv("SEARCH_AWS_SERVICE", "es"),
        )
