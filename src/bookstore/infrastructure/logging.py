import sys

from loguru import logger

from bookstore.infrastructure.config import Settings


def setup_logging(settings: Settings) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format='{{"timestamp": "{time:YYYY-MM-DDTHH:mm:ssZ}", '
               '"level": "{level}", '
               '"service": "bookstore", '
               '"message": "{message}"}}',
        level=settings.LOG_LEVEL,
        serialize=True,
    )
