"""Structured logging for guide generation."""

import json
import logging
import sys
from datetime import datetime, timezone


class GuideLogger:
    """Structured JSON logger for generation events."""

    def __init__(self, name: str = "guide_pipeline"):
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            # stdout belongs to the MCP stdio transport
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
            if self.logger.level == logging.NOTSET:
                self.logger.setLevel(logging.INFO)

    def _log(self, level: int, event: str, **kwargs):
        """Log a structured event."""
        data = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }
        self.logger.log(level, json.dumps(data))

    def generation_started(self, purpose: str, project_type: str):
        """Log the start of a generation request."""
        self._log(
            logging.INFO,
            "generation_started",
            purpose=purpose,
            project_type=project_type
        )

    def provider_called(self, provider: str, prompt_chars: int):
        """Log a provider invocation."""
        self._log(
            logging.INFO,
            "provider_called",
            provider=provider,
            prompt_chars=prompt_chars
        )

    def generation_complete(self, provider: str, duration_seconds: float, content_chars: int):
        """Log a successful generation."""
        self._log(
            logging.INFO,
            "generation_complete",
            provider=provider,
            duration_seconds=round(duration_seconds, 2),
            content_chars=content_chars
        )

    def error(self, provider: str, error_kind: str, message: str):
        """Log a failed generation."""
        self._log(
            logging.ERROR,
            "error",
            provider=provider,
            error_kind=error_kind,
            message=message
        )
