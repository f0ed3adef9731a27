import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work,
# even when pytest's rootdir is the repository root (pyproject.toml testpaths).
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.a11y_engine.models import Check
from pipelines.storage import InMemoryStorage


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def make_check(memory_storage):
    def _make(html: str, *, check_id: str = "check-1", url: str | None = None, domain: str | None = None) -> Check:
        check = Check(id=check_id, url=url, html=html, title="Test page", domain=domain)
        assert memory_storage.create_check(check)
        return check

    return _make
