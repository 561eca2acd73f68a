import asyncio
import logging
import sys
from pathlib import Path

import click

import src
from src.checker.tasks import ValidatorStatusCheck
from src.checker.typings import CheckerConfig
from src.commands.common_options import add_common_options, node_common_options
from src.common.clients import BeaconClient
from src.common.exceptions import ValidatorCheckError
from src.common.logging import setup_logging
from src.common.utils import get_build_version
from src.config.settings import CHUNK_SIZE, KEY_JSON_PATH, RESULTS_DIR, settings
from src.reports.webhook import WebhookNotifier

logger = logging.getLogger(__name__)


@click.option(
    '--chunk-size',
    type=click.IntRange(min=1),
    envvar='CHUNK_SIZE',
    default=CHUNK_SIZE,
    show_default=True,
    help='The number of public keys requested from the beacon node at once.',
)
@click.option(
    '--keys-file',
    type=click.Path(file_okay=True, dir_okay=False),
    envvar='KEY_JSON_PATH',
    default=KEY_JSON_PATH,
    show_default=True,
    help='Path to the json file with the list of {"pubkey": ...} objects.',
)
@click.option(
    '--results-dir',
    type=click.Path(file_okay=False, dir_okay=True),
    envvar='RESULTS_DIR',
    default=RESULTS_DIR,
    show_default=True,
    help='Directory where the status reports are written.',
)
@click.option(
    '--webhook-url',
    type=str,
    envvar='WEBHOOK_URL',
    help='Optional chat webhook receiving the status summary.',
)
@add_common_options(node_common_options)
@click.command(help='Checks the beacon chain status of the configured validator keys.')
# pylint: disable-next=too-many-arguments
def check_validators(
    chunk_size: int,
    keys_file: str,
    results_dir: str,
    webhook_url: str | None,
    node_endpoints: str,
    verbose: bool,
    log_level: str,
    log_format: str,
    enable_file_logging: bool,
    log_dir: Path | None,
) -> None:
    settings.set(
        node_endpoints=node_endpoints,
        chunk_size=chunk_size,
        keys_file=keys_file,
        results_dir=results_dir,
        webhook_url=webhook_url,
        verbose=verbose,
        log_level=log_level,
        log_format=log_format,
        enable_file_logging=enable_file_logging,
        log_dir=str(log_dir) if log_dir else None,
    )
    if not settings.node_endpoints:
        raise click.ClickException('NODE_ENDPOINT is missing')

    setup_logging()
    setup_sentry()
    log_start()

    try:
        asyncio.run(main())
    except ValidatorCheckError as e:
        logger.error('%s', e)
        sys.exit(1)


async def main() -> None:
    config = CheckerConfig.from_settings()
    notifier = None
    if config.webhook_url:
        notifier = WebhookNotifier(config.webhook_url, timeout=settings.webhook_timeout)

    async with BeaconClient(timeout=settings.beacon_timeout) as beacon_client:
        await ValidatorStatusCheck(
            config=config,
            beacon_client=beacon_client,
            notifier=notifier,
        ).run()


def log_start() -> None:
    build = get_build_version()
    start_str = 'Starting validator status checker'

    if build:
        logger.info('%s, version %s, build %s', start_str, src.__version__, build)
    else:
        logger.info('%s, version %s', start_str, src.__version__)


def setup_sentry() -> None:
    if settings.sentry_dsn:
        # pylint: disable-next=import-outside-toplevel
        import sentry_sdk

        sentry_sdk.init(
            settings.sentry_dsn,
            traces_sample_rate=0.1,
            environment=settings.sentry_environment or None,
        )
        sentry_sdk.set_tag('project_version', src.__version__)
