import json
import logging

from src.checker.keys import load_public_keys
from src.checker.nodes import NodeAvailabilityChecker
from src.checker.status import aggregate_status, log_status_summary
from src.checker.typings import CheckerConfig
from src.checker.validators import BatchedValidatorFetcher
from src.common.clients import BeaconClient
from src.common.exceptions import NoAvailableNodesError, NoValidatorDataError
from src.common.utils import log_verbose
from src.reports.webhook import WebhookNotifier, get_summary_title
from src.reports.writer import write_report

logger = logging.getLogger(__name__)


class ValidatorStatusCheck:
    """
    Single run of the validator status check:
    load keys, pick the first synced node, fetch, aggregate, report.
    """

    def __init__(
        self,
        config: CheckerConfig,
        beacon_client: BeaconClient,
        notifier: WebhookNotifier | None = None,
    ) -> None:
        self.config = config
        self.node_checker = NodeAvailabilityChecker(beacon_client)
        self.fetcher = BatchedValidatorFetcher(beacon_client, config.chunk_size)
        self.notifier = notifier

    async def run(self) -> dict:
        logger.info('Start checking keys')
        logger.info('Reading keys from file: %s', self.config.keys_file)
        public_keys = load_public_keys(self.config.keys_file)

        logger.info('Checking configured beacon nodes')
        node_endpoints = await self.node_checker.check_nodes(list(self.config.node_endpoints))
        if not node_endpoints:
            raise NoAvailableNodesError()

        # only the first available node is used
        node_endpoint = node_endpoints[0]
        logger.info('Checking %d keys on %s', len(public_keys), node_endpoint)
        validators: list[dict] = []
        try:
            validators = await self.fetcher.fetch_validators(public_keys, node_endpoint)
        except Exception as e:
            logger.error('Error checking keys on %s', node_endpoint)
            log_verbose(e)

        if not validators:
            raise NoValidatorDataError()

        logger.info('Getting status of validators')
        status = aggregate_status(validators, self.config.chunk_size, len(public_keys))
        logger.info('Status: %s', json.dumps(status))

        logger.info('Finished checking keys')
        log_status_summary(status, len(validators))

        write_report(status, self.config.results_dir)
        if self.notifier:
            await self.notifier.send_summary(status, get_summary_title(len(validators)))

        return status
