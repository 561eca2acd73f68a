import logging
from collections import defaultdict

from src.common.typings import ValidatorStatus
from src.common.utils import get_batch_ranges

logger = logging.getLogger(__name__)

SUMMARY_STATUSES = {
    ValidatorStatus.ACTIVE_ONGOING: 'Active validators',
    ValidatorStatus.WITHDRAWAL_DONE: 'Withdrawal done',
    ValidatorStatus.WITHDRAWAL_POSSIBLE: 'Withdrawal possible',
}


def aggregate_status(validators: list[dict], chunk_size: int, total_keys_count: int) -> dict:
    """
    Counts validators per status and active validators per batch range.
    Batch ranges share the key space with status names.
    """
    status: dict[str, int] = defaultdict(int)
    for validator in validators:
        status[validator['status']] += 1
        if validator['status'] == ValidatorStatus.ACTIVE_ONGOING.value:
            status[validator['batch']] += 1

    for batch in get_batch_ranges(total_keys_count, chunk_size):
        status.setdefault(batch, 0)

    return dict(status)


def log_status_summary(status: dict, validators_count: int) -> None:
    logger.info('Total validators checked: %d', validators_count)
    for validator_status, title in SUMMARY_STATUSES.items():
        if status.get(validator_status.value):
            logger.info('%s: %d', title, status[validator_status.value])
