"""File helpers shared by the TOML-backed stores."""

import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w


def write_toml_atomic(data: dict[str, Any], path: Path) -> Path:
    """Write a dictionary to a TOML file atomically.

    The data is written to a temporary file in the same directory, then
    moved into place with os.replace(). The temporary file is removed on
    failure.

    Args:
        data: TOML-serializable dictionary.
        path: Destination file path. Parent directories are created.

    Returns:
        The path written.

    Raises:
        OSError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(path))
    except OSError:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise

    return path
