from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
SRC_STR = str(SRC)
if SRC_STR not in sys.path:
    sys.path.insert(0, SRC_STR)


CANONICAL_SETTINGS = """\
# Start of file

# A foo entry.
foo = bar

    # These are subproperties of foo.bar
    biz = baz
    boo = beep

# Another foo entry.
foo = bang

    # These are subproperties of foo.bang
    biz = bizzaz
    boo = beepaz

# Comments start with the hash character (#).
fi = fum

# End of file
"""

CANONICAL_TREE = {
    "foo": {
        "bar": {"biz": "baz", "boo": "beep"},
        "bang": {"biz": "bizzaz", "boo": "beepaz"},
    },
    "fi": "fum",
}


@pytest.fixture
def canonical_file(tmp_path: Path) -> Path:
    path = tmp_path / "settings.default"
    path.write_text(CANONICAL_SETTINGS, encoding="utf-8")
    return path


@pytest.fixture
def canonical_text() -> str:
    return CANONICAL_SETTINGS


@pytest.fixture
def canonical_tree() -> dict:
    return copy.deepcopy(CANONICAL_TREE)
