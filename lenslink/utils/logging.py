# loguru setup
# lenslink/utils/logging.py
from loguru import logger
import sys

LOG_FORMAT = "{time:HH:mm:ss} | {level: <7} | lenslink | {message}"

def setup_logging(level="INFO", sink=None):
    """Route lenslink logs to one sink (stdout by default). Messages carry their own [stage] prefix."""
    logger.remove()
    logger.add(sink or sys.stdout, level=level, format=LOG_FORMAT,
               enqueue=True, backtrace=False, diagnose=False)
    return logger
