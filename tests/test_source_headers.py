# tests/test_source_headers.py
"""Every source module starts with a comment naming its path."""

from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
PACKAGE_INIT = SRC_ROOT / "quizsmith" / "__init__.py"
MODULES = sorted(p for p in (SRC_ROOT / "quizsmith").rglob("*.py") if p != PACKAGE_INIT)


@pytest.mark.parametrize("path", MODULES, ids=lambda p: p.relative_to(SRC_ROOT).as_posix())
def test_path_header(path):
    first_line = path.read_text(encoding="utf-8").splitlines()[0]
    assert first_line == f"# src/{path.relative_to(SRC_ROOT).as_posix()}"


def test_modules_found():
    assert len(MODULES) > 20
