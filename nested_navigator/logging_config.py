import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
  """Configure structlog for normal application logging.

  Args:
      level: Minimum level name to emit (e.g. "DEBUG", "INFO")
  """
  structlog.configure(
    processors=[
      structlog.processors.TimeStamper(fmt="iso"),
      structlog.processors.add_log_level,
      structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
      logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    cache_logger_on_first_use=False,
  )
