import structlog
import logging
import sys

def setup_logging(env: str) -> None:
    """
    Configure structlog based on environment.
    """
    processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
    ]

    if env in ("local", "development"):
        # Development: Colored Console
        processors.extend([
            structlog.dev.ConsoleRenderer()
        ])
    else:
        # Production: JSON
        processors.extend([
            structlog.processors.JSONRenderer(ensure_ascii=False)
        ])

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Log to stderr so CLI output on stdout stays clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.INFO,
    )
