from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from importlib import metadata

DISTRIBUTION_NAME = "synatra-python-sdk"


def _get_version() -> str:
    current_file = Path(__file__)
    pyproject_path = current_file.parent.parent / "pyproject.toml"

    try:
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
        return str(pyproject_data["project"]["version"])
    except (FileNotFoundError, KeyError):
        pass

    # Installed as a regular wheel, pyproject.toml is not shipped
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        raise ValueError("Failed to read version from pyproject.toml or package metadata")


SDK_VERSION = _get_version()
