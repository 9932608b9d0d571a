"""
Configuration management for the search service.
"""

import os
from dataclasses import dataclass

from ..elasticsearch.config import ElasticsearchConfig
from ..transformer.highlight import END_HIGHLIGHT_TAG, START_HIGHLIGHT_TAG, HighlightMarkers


@dataclass
class SearchServiceConfig:
    """Main search service configuration."""

    # Backend configuration (required - must be first)
    elasticsearch_config: ElasticsearchConfig

    # Service configuration
    service_name: str = "search"
    service_version: str = "1.0.0"

    # Highlight markup emitted by the backend
    highlight_start_tag: str = START_HIGHLIGHT_TAG
    highlight_end_tag: str = END_HIGHLIGHT_TAG

    # Logging configuration
    log_level: str = "INFO"
    json_logs: bool = True

    @property
    def highlight_markers(self) -> HighlightMarkers:
        return HighlightMarkers(start_tag=self.highlight_start_tag, end_tag=self.highlight_end_tag)

    @classmethod
    def from_environment(cls) -> "SearchServiceConfig":
        """Create configuration from environment variables."""

        return cls(
            elasticsearch_config=ElasticsearchConfig.from_environment(),
            service_name=os.getenv("SEARCH_SERVICE_NAME", "search"),
            service_version=os.getenv("SEARCH_SERVICE_VERSION", "1.0.0"),
            highlight_start_tag=os.getenv("SEARCH_HIGHLIGHT_START_TAG", START_HIGHLIGHT_TAG),
            highlight_end_tag=os.getenv("SEARCH_HIGHLIGHT_END_TAG", END_HIGHLIGHT_TAG),
            log_level=os.getenv("SEARCH_LOG_LEVEL", "INFO"),
            json_logs=os.getenv("SEARCH_JSON_LOGS", "true").lower() == "true",
        )
