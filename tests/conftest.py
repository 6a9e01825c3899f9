import sys
from pathlib import Path

import pytest

EXAMPLE_ROOT = Path(__file__).resolve().parents[1]

if str(EXAMPLE_ROOT) not in sys.path:
    sys.path.insert(0, str(EXAMPLE_ROOT))


@pytest.fixture()
def write_module(tmp_path):
    """Return a helper writing Python source into a temporary module file."""

    def _write(source: str, name: str = "module.py") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep pyproject discovery away from the repository's own pyproject.toml."""
    monkeypatch.chdir(tmp_path)
