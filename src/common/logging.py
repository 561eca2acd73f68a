import logging
import warnings

from src.common.utils import JsonFormatter
from src.config.settings import (
    COMBINED_LOG_FILENAME,
    ERROR_LOG_FILENAME,
    LOG_DATE_FORMAT,
    LOG_JSON,
    settings,
)

LOG_LEVELS = [
    'FATAL',
    'ERROR',
    'WARNING',
    'INFO',
    'DEBUG',
]

PLAIN_LOG_FORMAT = '%(asctime)s %(levelname)-8s %(message)s'
JSON_LOG_FORMAT = '%(timestamp)s %(level)s %(name)s %(message)s'


def setup_logging() -> None:
    formatter = _create_formatter()
    handlers: list[logging.Handler] = []

    log_handler = logging.StreamHandler()
    log_handler.setFormatter(formatter)
    handlers.append(log_handler)

    if settings.enable_file_logging:
        handlers.extend(_create_file_handlers(formatter))

    logging.basicConfig(
        level=settings.log_level,
        handlers=handlers,
        force=True,
    )

    if not settings.verbose:
        logging.getLogger('aiohttp.client').setLevel(logging.ERROR)
        logging.getLogger('aiohttp.internal').setLevel(logging.ERROR)

        # Logging config does not affect messages issued by `warnings` module
        warnings.simplefilter('ignore')


def _create_formatter() -> logging.Formatter:
    if settings.log_format == LOG_JSON:
        return JsonFormatter(JSON_LOG_FORMAT)
    return logging.Formatter(PLAIN_LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def _create_file_handlers(formatter: logging.Formatter) -> list[logging.Handler]:
    settings.log_dir.mkdir(parents=True, exist_ok=True)

    combined_handler = logging.FileHandler(settings.log_dir / COMBINED_LOG_FILENAME)
    combined_handler.setFormatter(formatter)

    error_handler = logging.FileHandler(settings.log_dir / ERROR_LOG_FILENAME)
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    return [combined_handler, error_handler]
