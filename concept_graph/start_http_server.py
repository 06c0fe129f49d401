#!/usr/bin/env python3
"""
HTTP launcher. Command-line flags override the KG_* environment variables
read by ServerConfig.from_env.

    concept-graph-http [--port PORT] [--host HOST] [--log-level LEVEL] [--seed]
"""

import argparse
import logging
import os
import sys

logger = logging.getLogger(__name__)


def apply_overrides(args: argparse.Namespace) -> None:
    """Copy given flags into the environment so from_env sees them."""
    if args.port:
        os.environ["KG_HTTP_PORT"] = str(args.port)
    if args.host:
        os.environ["KG_HTTP_HOST"] = args.host
    if args.log_level:
        os.environ["KG_LOG_LEVEL"] = args.log_level.upper()
    if args.seed:
        os.environ["KG_SEED"] = "true"


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Knowledge Graph HTTP Server")
    parser.add_argument("--port", type=int, default=None, help="Server port (default: 4000)")
    parser.add_argument("--host", default=None, help="Server host (default: 127.0.0.1)")
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO)")
    parser.add_argument("--seed", action="store_true", help="Load demo concepts at startup")
    apply_overrides(parser.parse_args(argv))

    # Imported late so app.py configures logging with the overridden level
    import uvicorn

    from concept_graph.api.app import create_app
    from concept_graph.config import ServerConfig

    config = ServerConfig.from_env()
    logger.info(f"Starting Knowledge Graph HTTP Server on {config.host}:{config.port} ({config.environment})")

    try:
        uvicorn.run(
            create_app(config=config),
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    except Exception as e:
        logger.error(f"Error starting server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
