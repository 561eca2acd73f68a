from pathlib import Path
from typing import Callable

import click
from click.decorators import FC

from src.common.logging import LOG_LEVELS
from src.config.settings import LOG_FORMATS, LOG_PLAIN, NODE_ENDPOINT

node_common_options = [
    click.option(
        '--node-endpoints',
        type=str,
        envvar='NODE_ENDPOINT',
        default=NODE_ENDPOINT,
        show_default=True,
        help='Comma separated list of beacon node endpoints (host:port). '
        'The first synced node is used.',
    ),
    click.option(
        '-v',
        '--verbose',
        help='Enable debug mode. Default is false.',
        envvar='VERBOSE',
        is_flag=True,
    ),
    click.option(
        '--log-level',
        type=click.Choice(
            LOG_LEVELS,
            case_sensitive=False,
        ),
        default='INFO',
        envvar='LOG_LEVEL',
        help='The log level.',
    ),
    click.option(
        '--log-format',
        type=click.Choice(
            LOG_FORMATS,
            case_sensitive=False,
        ),
        default=LOG_PLAIN,
        envvar='LOG_FORMAT',
        help='The log record format. Can be "plain" or "json".',
    ),
    click.option(
        '--enable-file-logging',
        help='Write combined.log and error.log files to the log dir. '
        'Disabled by default, logs go to stderr only.',
        envvar='ENABLE_FILE_LOGGING',
        is_flag=True,
        default=False,
    ),
    click.option(
        '--log-dir',
        type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
        envvar='LOG_DIR',
        help='Directory for the log files. Default is the current directory.',
    ),
]


def add_common_options(options: list[Callable[[FC], FC]]) -> Callable:
    def _add_common_options(func: FC) -> Callable:
        for option in reversed(options):
            func = option(func)
        return func

    return _add_common_options
