import logging
import sys

def configure_logging(level=logging.WARNING):
    """Configure logging to stderr"""
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter('[%(levelname)s] %(message)s')
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Only one handler, status lines share stderr with it
    if root_logger.handlers:
        root_logger.handlers.clear()

    root_logger.addHandler(handler)
