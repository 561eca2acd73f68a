import json
import logging
from datetime import datetime
from pathlib import Path

from src.common.utils import get_report_timestamp
from src.config.settings import REPORT_FILENAME_PREFIX

logger = logging.getLogger(__name__)


def get_report_path(results_dir: Path, now: datetime | None = None) -> Path:
    return results_dir / f'{REPORT_FILENAME_PREFIX}-{get_report_timestamp(now)}.json'


def write_report(status: dict, results_dir: Path, now: datetime | None = None) -> Path | None:
    report_path = get_report_path(results_dir, now)
    try:
        results_dir.mkdir(parents=True, exist_ok=True)
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(status, f, indent=2)
    except OSError as e:
        logger.error('Error writing file: %s. %s', report_path, e)
        return None

    logger.info('Results written to: %s', report_path)
    return report_path
