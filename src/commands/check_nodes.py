import asyncio
import json
import sys
from pathlib import Path

import click

from src.checker.nodes import NodeAvailabilityChecker
from src.commands.common_options import add_common_options, node_common_options
from src.common.clients import BeaconClient
from src.common.logging import setup_logging
from src.common.utils import greenify
from src.config.settings import settings

OUTPUT_FORMATS = ['text', 'json']


@click.option(
    '--output-format',
    default='text',
    envvar='OUTPUT_FORMAT',
    help='The output format for the command.',
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    show_default=True,
)
@add_common_options(node_common_options)
@click.command(help='Displays the beacon nodes which are ready to serve requests.')
# pylint: disable-next=too-many-arguments
def check_nodes(
    output_format: str,
    node_endpoints: str,
    verbose: bool,
    log_level: str,
    log_format: str,
    enable_file_logging: bool,
    log_dir: Path | None,
) -> None:
    settings.set(
        node_endpoints=node_endpoints,
        verbose=verbose,
        log_level=log_level,
        log_format=log_format,
        enable_file_logging=enable_file_logging,
        log_dir=str(log_dir) if log_dir else None,
    )
    if not settings.node_endpoints:
        raise click.ClickException('NODE_ENDPOINT is missing')

    setup_logging()

    available_nodes = asyncio.run(main())
    _log_available_nodes(available_nodes, output_format)
    if not available_nodes:
        sys.exit(1)


async def main() -> list[str]:
    async with BeaconClient(timeout=settings.beacon_timeout) as beacon_client:
        return await NodeAvailabilityChecker(beacon_client).check_nodes(settings.node_endpoints)


def _log_available_nodes(available_nodes: list[str], output_format: str) -> None:
    if output_format == 'json':
        click.echo(
            json.dumps(
                {
                    'configured': settings.node_endpoints,
                    'available': available_nodes,
                }
            )
        )
        return

    if not available_nodes:
        click.echo('No available beacon nodes.')
        return

    click.echo(f'Available beacon nodes: {greenify(", ".join(available_nodes))}')
    click.echo(f'Selected node: {greenify(available_nodes[0])}')
