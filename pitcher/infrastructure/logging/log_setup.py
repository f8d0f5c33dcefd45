# pitcher/infrastructure/logging/log_setup.py
from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {message}"


def setup_console_logging(level: str = "INFO", fmt: str = CONSOLE_FORMAT) -> None:
    """Replace every loguru sink with a single stdout sink at ``level``."""
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level=level.upper(), format=fmt, colorize=False)
