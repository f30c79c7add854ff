"""Custom logging levels.

Adds a TRACE level below DEBUG for request dumps and other very verbose output.
"""

import logging

TRACE_LEVEL = 5

# Register level name only once (idempotent)
if not hasattr(logging.Logger, "trace"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    def trace(self: logging.Logger, message: str, *args, **kws) -> None:
        """Log 'message % args' with severity 'TRACE'."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, message, args, **kws)

    logging.Logger.trace = trace  # type: ignore[attr-defined]


def is_trace_enabled(logger: logging.Logger) -> bool:
    """Return True if the logger would emit a TRACE record."""
    return logger.isEnabledFor(TRACE_LEVEL)


__all__ = ["TRACE_LEVEL", "is_trace_enabled"]
