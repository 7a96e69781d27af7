# vcr_cassette/infrastructure/logging/log_setup.py
from loguru import logger

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message} {extra}"


def setup_console_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level=level, format=CONSOLE_FORMAT)
