from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _clear_cssbuilder_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CSSBUILDER_STRICT_COMBINATORS", raising=False)
    monkeypatch.delenv("CSSBUILDER_LOG_LEVEL", raising=False)
