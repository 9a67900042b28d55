"""
Logging setup for the CLI and MCP entry points.
MCP stdio servers write protocol messages to stdout, so logs go to stderr.
"""

import logging
import sys
from typing import Optional

from guide_pipeline.config import GeneratorConfig
from guide_pipeline.orchestrator.errors import ConfigurationError


def setup_logging(
    name: Optional[str] = None,
    config: Optional[GeneratorConfig] = None,
) -> logging.Logger:
    """
    Setup logging for an entry point

    Args:
        name: Logger name (default: guide_pipeline)
        config: Generator configuration (default: from environment)

    Returns:
        Configured logger instance
    """
    if config is None:
        try:
            config = GeneratorConfig.from_env()
        except ConfigurationError:
            # reported to the caller by the first generation request
            config = GeneratorConfig()
    logger = logging.getLogger(name or "guide_pipeline")

    if not config.enable_logging:
        logger.setLevel(logging.CRITICAL)
        return logger

    level = logging.DEBUG if config.debug else logging.INFO
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)

    return logger
