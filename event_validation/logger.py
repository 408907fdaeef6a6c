import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logger(name: str = 'event_validation', level: str = 'INFO', stream=None) -> logging.Logger:
    """Attach a fresh console handler to the package logger (stdout unless a stream is given)."""
    logger = logging.getLogger(name)
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    # Replace rather than retarget: the old stream may already be closed
    for old in [h for h in logger.handlers if getattr(h, '_event_validation', False)]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    handler._event_validation = True
    logger.addHandler(handler)

    return logger
