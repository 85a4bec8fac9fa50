import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)

    # The proxy transport logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
