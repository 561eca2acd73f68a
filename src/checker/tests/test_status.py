import logging
import random

import pytest

from src.checker.status import aggregate_status, log_status_summary


def _validators(status: str, batch: str, count: int) -> list[dict]:
    return [{'status': status, 'batch': batch} for _ in range(count)]


class TestAggregateStatus:
    def test_all_active(self):
        validators = _validators('active_ongoing', '0-5', 5) + _validators(
            'active_ongoing', '5-10', 2
        )

        status = aggregate_status(validators, chunk_size=5, total_keys_count=7)

        assert status == {'active_ongoing': 7, '0-5': 5, '5-10': 2}

    def test_no_active_validators(self):
        validators = _validators('withdrawal_done', '0-500', 3)

        status = aggregate_status(validators, chunk_size=500, total_keys_count=3)

        assert status == {'withdrawal_done': 3, '0-500': 0}

    def test_mixed_statuses(self):
        validators = (
            _validators('active_ongoing', '0-3', 2)
            + _validators('exited_unslashed', '0-3', 1)
            + _validators('withdrawal_possible', '3-6', 2)
            + _validators('active_ongoing', '6-9', 1)
        )

        status = aggregate_status(validators, chunk_size=3, total_keys_count=7)

        assert status == {
            'active_ongoing': 3,
            'exited_unslashed': 1,
            'withdrawal_possible': 2,
            '0-3': 2,
            '3-6': 0,
            '6-9': 1,
        }

    def test_only_exact_active_status_counts_per_batch(self):
        validators = _validators('active_exiting', '0-2', 1) + _validators(
            'active_slashed', '0-2', 1
        )

        status = aggregate_status(validators, chunk_size=2, total_keys_count=2)

        assert status == {'active_exiting': 1, 'active_slashed': 1, '0-2': 0}

    def test_missing_validators_keep_all_batch_ranges(self):
        # beacon node does not return unknown keys
        validators = _validators('active_ongoing', '0-2', 1)

        status = aggregate_status(validators, chunk_size=2, total_keys_count=5)

        assert status == {'active_ongoing': 1, '0-2': 1, '2-4': 0, '4-6': 0}

    def test_empty(self):
        assert aggregate_status([], chunk_size=500, total_keys_count=0) == {}

    def test_order_independent(self):
        validators = (
            _validators('active_ongoing', '0-4', 3)
            + _validators('pending_queued', '0-4', 1)
            + _validators('active_ongoing', '4-8', 2)
            + _validators('exited_slashed', '8-12', 1)
        )
        expected = aggregate_status(validators, chunk_size=4, total_keys_count=10)

        for _ in range(5):
            shuffled = validators[:]
            random.shuffle(shuffled)
            assert aggregate_status(shuffled, chunk_size=4, total_keys_count=10) == expected

    def test_status_name_shares_key_space_with_batches(self):
        validators = [{'status': '0-2', 'batch': '0-2'}]

        status = aggregate_status(validators, chunk_size=2, total_keys_count=2)

        assert status == {'0-2': 1}

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            aggregate_status([], chunk_size=0, total_keys_count=3)


class TestLogStatusSummary:
    def test_logs_known_statuses(self, caplog):
        caplog.set_level(logging.INFO)

        log_status_summary(
            {'active_ongoing': 4, 'withdrawal_done': 2, 'pending_queued': 1, '0-500': 4},
            validators_count=7,
        )

        assert 'Total validators checked: 7' in caplog.text
        assert 'Active validators: 4' in caplog.text
        assert 'Withdrawal done: 2' in caplog.text
        assert 'Withdrawal possible' not in caplog.text
