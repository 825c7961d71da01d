"""Load and persist the repositories snapshot file."""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from dependabot_tracker.errors import StartupDataError
from dependabot_tracker.models import Repository

logger = logging.getLogger("dependabot_tracker")

_REPOSITORIES = TypeAdapter(List[Repository])


def read_repositories(path: Path) -> List[Repository]:
    """Parse the snapshot at ``path``, raising StartupDataError on any problem."""
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise StartupDataError(f"Cannot read snapshot {path}: {e}") from e
    try:
        return _REPOSITORIES.validate_json(raw)
    except ValidationError as e:
        raise StartupDataError(f"Snapshot {path} is not a valid repository list: {e}") from e


def load_repositories(path: Path) -> List[Repository]:
    """Load the snapshot, degrading to an empty list when it is missing or corrupt."""
    try:
        repositories = read_repositories(path)
    except StartupDataError as e:
        logger.error("Failed to load repositories from file: %s", e)
        return []
    logger.info("Loaded %d repositories from %s", len(repositories), path)
    return repositories


def save_repositories(path: Path, repositories: List[Repository]) -> Path:
    """Overwrite the snapshot with ``repositories``."""
    output_file = Path(path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    # Replace in one step so an interrupted write never truncates the old file.
    fd, tmp_name = tempfile.mkstemp(dir=output_file.parent, prefix=f".{output_file.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(_REPOSITORIES.dump_json(repositories, indent=2))
        os.replace(tmp_name, output_file)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Wrote %d repositories to %s", len(repositories), output_file)
    return output_file


def snapshot_timestamp(path: Path) -> Optional[str]:
    """Modification time of the snapshot, or None if it does not exist."""
    try:
        mtime = Path(path).stat().st_mtime
    except OSError:
        return None
    return datetime.fromtimestamp(mtime).strftime("%Y-%m-%d %H:%M:%S")
