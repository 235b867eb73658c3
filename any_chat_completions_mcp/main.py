"""
Entry point: start the MCP chat server on stdio.
"""

import argparse
import asyncio
import logging
import sys

from any_chat_completions_mcp.config.settings import load_settings
from any_chat_completions_mcp.container import DependencyContainer
from any_chat_completions_mcp.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # stdout carries the protocol; basicConfig writes to stderr.
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    parser = argparse.ArgumentParser(
        prog="any-chat-completions-mcp",
        description="Expose an OpenAI-compatible chat endpoint as an MCP tool over stdio.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)",
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    info = settings.get_model_info()
    logger.info(
        f"Serving tool {info['tool']} backed by {info['model']} at {info['provider']}"
    )

    container = DependencyContainer(settings)
    try:
        asyncio.run(container.get_server().serve())
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logger.error(f"Server error: {e}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
