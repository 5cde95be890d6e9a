import sys

from loguru import logger

from .config import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def setup_logging(level: str | None = None) -> int:
    """
    Переналаштовує loguru: прибирає стандартний sink і додає один у stderr.
    Повертає id нового handler-а (щоб його можна було зняти через logger.remove).
    """
    logger.remove()
    return logger.add(sys.stderr, level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
