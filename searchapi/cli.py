"""
CLI entry point for the search transformer.
"""

import argparse
import asyncio
import logging
import sys

from .elasticsearch.client import ElasticsearchClient
from .elasticsearch.config import ElasticsearchConfig
from .elasticsearch.exceptions import ElasticsearchException
from .elasticsearch.signer import RequestSigner
from .search.config import SearchServiceConfig
from .transformer.exceptions import TransformerException
from .transformer.highlight import END_HIGHLIGHT_TAG, START_HIGHLIGHT_TAG, HighlightMarkers
from .transformer.transformer import Transformer
from .utils.logging import setup_logger


def transform(source: str, query: str, markers: HighlightMarkers) -> int:
    """Transform a saved backend response and print the public JSON."""
    if source == "-":
        response_data = sys.stdin.buffer.read()
    else:
        with open(source, "rb") as f:
            response_data = f.read()

    try:
        transformed = Transformer(markers).transform_search_response(response_data, query)
    except TransformerException as e:
        print(f"❌ {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(transformed.decode("utf-8"))
    sys.stdout.write("\n")
    return 0


async def health_check(config: ElasticsearchConfig) -> bool:
    """Check the search backend is reachable."""
    print("Performing health checks...")

    client = None
    try:
        signer = RequestSigner(config.aws_region, config.aws_service) if config.sign_requests else None
        client = ElasticsearchClient(config, signer=signer)
        status = await client.get_status()
        print(f"✅ Elasticsearch accessible: {status.decode('utf-8', 'replace').strip()}")
        return True
    except ElasticsearchException as e:
        print(f"❌ Elasticsearch not accessible: {e}")
        return False
    finally:
        if client is not None:
            await client.close()


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Search response transformer")

    parser.add_argument("command", choices=["transform", "health", "config"], help="Command to execute")
    parser.add_argument(
        "source", nargs="?", default="-", help="Backend response JSON file for 'transform' ('-' for stdin)"
    )
    parser.add_argument("--query", "-q", default="", help="Original query text, used for fallback suggestions")
    parser.add_argument("--start-tag", default=START_HIGHLIGHT_TAG, help="Highlight start marker")
    parser.add_argument("--end-tag", default=END_HIGHLIGHT_TAG, help="Highlight end marker")

    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level"
    )
    parser.add_argument("--json-logs", action="store_true", help="Output logs in JSON format")

    args = parser.parse_args()

    setup_logger("searchapi", args.log_level, args.json_logs)

    if args.command == "transform":
        markers = HighlightMarkers(start_tag=args.start_tag, end_tag=args.end_tag)
        sys.exit(transform(args.source, args.query, markers))

    try:
        config = SearchServiceConfig.from_environment()

        if args.command == "config":
            # Show configuration (without sensitive data)
            es_config = config.elasticsearch_config
            print("Search Configuration:")
            print(f"  Service: {config.service_name} {config.service_version}")
            print(f"  Elasticsearch: {es_config.endpoint}")
            print(f"  Index: {es_config.index}/{es_config.doc_type}")
            print(f"  Signed Requests: {es_config.sign_requests}")
            if es_config.sign_requests:
                print(f"  AWS Region: {es_config.aws_region}")
            print(f"  Highlight Tags: {config.highlight_start_tag} {config.highlight_end_tag}")

        elif args.command == "health":
            success = asyncio.run(health_check(config.elasticsearch_config))
            sys.exit(0 if success else 1)

    except ValueError as e:
        logging.error(f"Invalid configuration: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
