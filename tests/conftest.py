from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the repo root.
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def glossary_file(tmp_path: Path) -> Path:
    path = tmp_path / "terms.txt"
    path.write_text(
        "Python\n"
        "A language that is like Java.\n"
        "\n"
        "Java\n"
        "A programming language.\n"
        "\n"
        "C#\n"
        "Java, but from\n"
        " Microsoft.\n",
        encoding="utf-8",
    )
    return path
