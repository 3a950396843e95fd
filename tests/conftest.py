from __future__ import annotations

import pytest

from core.domain.linked_list import LinkedList


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep local `.env` files and PROTOPLAY_* variables out of the tests."""

    monkeypatch.chdir(tmp_path)
    for key in ("LOG_LEVEL", "SHOW_BANNER", "SAMPLE_VALUES", "NODE_DEFAULT_VALUE"):
        monkeypatch.delenv(f"PROTOPLAY_{key}", raising=False)


@pytest.fixture
def abc_list() -> LinkedList[str]:
    ll: LinkedList[str] = LinkedList()
    for value in ("a", "b", "c"):
        ll.add(value)
    return ll
