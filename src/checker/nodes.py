import logging

from src.common.clients import BeaconClient
from src.common.utils import format_error

logger = logging.getLogger(__name__)


class NodeAvailabilityChecker:
    def __init__(self, beacon_client: BeaconClient) -> None:
        self.beacon_client = beacon_client

    async def check_nodes(self, endpoints: list[str]) -> list[str]:
        """
        Returns endpoints which are not syncing, in configuration order.
        Unreachable nodes and malformed responses count as unavailable.
        """
        available_nodes = []
        for endpoint in endpoints:
            try:
                syncing = (await self.beacon_client.get_syncing(endpoint))['data']
                is_syncing = syncing['is_syncing']
                sync_distance = syncing.get('sync_distance')
            except Exception as e:
                logger.error('Error connecting to beacon node %s: %s', endpoint, format_error(e))
                continue

            logger.info(
                'Beacon node %s is %s (%s)',
                endpoint,
                'syncing' if is_syncing else 'not syncing',
                sync_distance,
            )
            if not is_syncing:
                available_nodes.append(endpoint)

        return available_nodes
