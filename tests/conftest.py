"""Pytest configuration: project root and the ranked list service on sys.path."""

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
_svc = _root / "services" / "ranked-list-service"
for p in (str(_svc), str(_root)):
    if p not in sys.path:
        sys.path.insert(0, p)


@pytest.fixture
def client():
    """In-process client for the ranked list service."""
    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app) as c:
        yield c
