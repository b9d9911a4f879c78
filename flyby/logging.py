import logging

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] [%(name)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a flyby module.

    Args:
        name: The name for the logger, typically __name__ of the calling module.

    Returns:
        A Logger with a stream handler using ISO 8601 timestamps. The handler
        is only attached the first time a given name is requested.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
