"""Test configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT_CANDIDATE = Path(__file__).resolve().parents[1]

try:
    from navdock.bootstrap import ensure_project_root
except ModuleNotFoundError:  # pragma: no cover - fallback when PYTHONPATH lacks repo
    if str(PROJECT_ROOT_CANDIDATE) not in sys.path:
        sys.path.insert(0, str(PROJECT_ROOT_CANDIDATE))
    from navdock.bootstrap import ensure_project_root

PROJECT_ROOT = ensure_project_root(PROJECT_ROOT_CANDIDATE)


@pytest.fixture(autouse=True)
def _reset_selection_cache():
    """Ensure memoized selections do not leak across tests."""

    from navdock.modules.route_matcher import clear_selection_cache

    clear_selection_cache()
    try:
        yield
    finally:
        clear_selection_cache()
