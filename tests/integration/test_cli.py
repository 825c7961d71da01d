"""Integration test: run the entry point as a subprocess."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


@pytest.mark.integration
def test_exits_when_credentials_missing(tmp_path):
    """Without PAT and GH_USERNAME the dashboard refuses to start."""
    env = {
        k: v
        for k, v in os.environ.items()
        if k not in {"PAT", "GH_USERNAME"} and not k.startswith("DEPENDABOT_TRACKER_")
    }
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

    proc = subprocess.run(
        [sys.executable, "-m", "dependabot_tracker"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        timeout=30,
    )

    assert proc.returncode == 1
    assert "PAT and GH_USERNAME must be set" in proc.stderr
