from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import tomli

PROJECT_NAME = 'validator-status-checker'


def _get_project_version() -> str:
    toml_path = Path(__file__).parents[1].joinpath('pyproject.toml')
    if not toml_path.exists():
        try:
            return version(PROJECT_NAME)
        except PackageNotFoundError:
            return 'unknown'

    with toml_path.open(mode='rb') as pyproject:
        return tomli.load(pyproject)['tool']['poetry']['version']


__version__ = _get_project_version()
