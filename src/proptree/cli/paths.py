from __future__ import annotations

"""Utilities for resolving the default configuration path."""

from pathlib import Path

CONFIG_FILENAME = "proptree.yaml"


def default_config_path() -> str:
    return str(Path.cwd() / CONFIG_FILENAME)


def resolve_config_path(path: str | None) -> str:
    """Return ``path`` when given, else ``proptree.yaml`` in the working directory.

    A directory is resolved to the ``proptree.yaml`` inside it.
    """
    if not path:
        return default_config_path()
    p = Path(path)
    if p.is_dir():
        return str(p / CONFIG_FILENAME)
    return str(p)
