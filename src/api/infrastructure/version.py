"""Version of the grafana-folder-permissions distribution.

The version is reported in the ``folder_permissions_starting`` event. An
installed distribution answers from its metadata; a source checkout that
only puts ``src/api`` on the path (as the test configuration does) reads
the repository's pyproject.toml instead.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "grafana-folder-permissions"

# src/api/infrastructure/version.py -> repository root
PYPROJECT_PATH = Path(__file__).parents[3] / "pyproject.toml"


def get_version() -> str:
    """Return the installed version, or the checkout's declared one."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        with open(PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomllib.load(f)

        return pyproject_data["project"]["version"]


__version__ = get_version()
