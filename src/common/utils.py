import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator, TypeVar

import click
from aiohttp import ClientResponseError
from pythonjsonlogger import jsonlogger

from src.config.settings import LOG_DATE_FORMAT, REPORT_TIMESTAMP_FORMAT, settings

logger = logging.getLogger(__name__)

T = TypeVar('T')


def get_build_version() -> str | None:
    path = Path(__file__).parents[1].joinpath('GIT_SHA')
    if not path.exists():
        return None

    with path.open(encoding='utf-8') as fh:
        return fh.read().strip()


def log_verbose(e: Exception) -> None:
    if settings.verbose:
        logger.exception(e)
    else:
        logger.error(format_error(e))


def format_error(e: BaseException) -> str:
    if isinstance(e, asyncio.TimeoutError):
        # str(e) returns empty string
        return repr(e)

    if isinstance(e, ClientResponseError):
        return f'{e.status} {e.message}'

    return str(e)


def chunkify(items: list[T], size: int) -> Iterator[tuple[int, list[T]]]:
    """Yields (offset, slice) pairs of at most `size` consecutive items."""
    if size < 1:
        raise ValueError(f'Chunk size must be positive, got {size}')
    for i in range(0, len(items), size):
        yield i, items[i : i + size]


def batch_range(offset: int, size: int) -> str:
    # nominal size is used, the last label may extend past the items count
    return f'{offset}-{offset + size}'


def get_batch_ranges(items_count: int, size: int) -> list[str]:
    if size < 1:
        raise ValueError(f'Chunk size must be positive, got {size}')
    return [batch_range(offset, size) for offset in range(0, items_count, size)]


def get_report_timestamp(now: datetime | None = None) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    return now.strftime(REPORT_TIMESTAMP_FORMAT)


def greenify(value: Any) -> str:
    return click.style(value, bold=True, fg='green')


class JsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):  # type: ignore
        super().add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            date = datetime.fromtimestamp(record.created, tz=timezone.utc)
            log_record['timestamp'] = date.strftime(LOG_DATE_FORMAT)
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname
