"""az-boards-md: Markdown-aware Azure Boards work item commands."""

import tomllib
from pathlib import Path

try:
    # Prefer pyproject.toml when running from a source checkout
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    __version__ = data["project"]["version"]
except Exception:
    # Installed (non-editable) package: use distribution metadata
    try:
        from importlib.metadata import version

        __version__ = version("az-boards-md")
    except Exception:
        __version__ = "0.0.0-dev"
