import click

import src
from src.commands.check_nodes import check_nodes
from src.commands.check_validators import check_validators
from src.common.utils import get_build_version

build = get_build_version()
version = src.__version__
if build:
    version += f'-{build}'


@click.version_option(version=version, prog_name='Validator status checker')
@click.group()
def cli() -> None:
    pass


cli.add_command(check_validators)
cli.add_command(check_nodes)


if __name__ == '__main__':
    cli()
