import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so 'complexcalc' is importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("SUPABASE_DISABLED", "1")
os.environ.setdefault("CALC_HISTORY_LOCAL_DIR", tempfile.mkdtemp(prefix="complexcalc-history-"))


@pytest.fixture(scope="session")
def client() -> TestClient:
    # lazy import after env configured
    from complexcalc.main import create_app

    app = create_app()
    return TestClient(app)


@pytest.fixture()
def auth_header(request) -> dict[str, str]:
    # any token is accepted in disabled mode; one token per test keeps sessions apart
    return {"Authorization": f"Bearer token-{request.node.name}"}
