import json
import logging

from eth_typing import HexStr

from src.common.clients import BeaconClient
from src.common.exceptions import MalformedResponseError
from src.common.utils import batch_range, chunkify

logger = logging.getLogger(__name__)


class BatchedValidatorFetcher:
    def __init__(self, beacon_client: BeaconClient, chunk_size: int) -> None:
        if chunk_size < 1:
            raise ValueError(f'Chunk size must be positive, got {chunk_size}')
        self.beacon_client = beacon_client
        self.chunk_size = chunk_size

    async def fetch_validators(self, public_keys: list[HexStr], endpoint: str) -> list[dict]:
        """
        Fetches validators batch by batch and tags every record with its batch range.
        A single malformed batch response discards the whole result.
        """
        validators: list[dict] = []
        for offset, chunk in chunkify(public_keys, self.chunk_size):
            batch = batch_range(offset, self.chunk_size)
            response = await self.beacon_client.get_validators_by_ids(endpoint, chunk)
            try:
                records = _get_response_data(response)
            except MalformedResponseError as e:
                logger.error('Response: %s', _dump_response(e.response))
                return []

            validators.extend({**record, 'batch': batch} for record in records)
            logger.info('Finished batch %s - %s', offset, offset + self.chunk_size)

        return validators


def _get_response_data(response: object) -> list[dict]:
    if not isinstance(response, dict):
        raise MalformedResponseError(response)

    data = response.get('data')
    if not isinstance(data, list):
        raise MalformedResponseError(response)
    return data


def _dump_response(response: object) -> str:
    try:
        return json.dumps(response, indent=2)
    except (TypeError, ValueError):
        return repr(response)
