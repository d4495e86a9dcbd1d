from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.query_engine'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_entry(i: int, **overrides):
    entry = {
        "id": i,
        "name": f"Person {i}",
        "jobTitle": "Staff",
        "socialLinks": {},
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def eight_entries():
    entries = [make_entry(i) for i in range(1, 9)]
    entries[1]["jobTitle"] = "Software Engineer"
    entries[3]["jobTitle"] = "Frontend Engineer"
    entries[5]["jobTitle"] = "DevOps Engineer"
    entries[6]["skills"] = ["Go", "Rust"]
    entries[7]["bio"] = "Loves SQL and dashboards"
    return entries


@pytest.fixture
def store(eight_entries):
    from store.record_store import RecordStore
    return RecordStore.load(eight_entries)
