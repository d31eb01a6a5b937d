from pathlib import Path
from typing import Iterable

import pytest


@pytest.fixture
def make_files(tmp_path: Path):
    """Create empty files relative to tmp_path and return their absolute paths"""
    def _make(names: Iterable[str]):
        paths = []
        for name in names:
            p = tmp_path / name
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(name, encoding="utf-8")
            paths.append(str(p))
        return paths
    return _make
