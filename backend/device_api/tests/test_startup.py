import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from device_api.core.config import Settings
from device_api.db.session import build_engine, init_db, SEED_DEVICES
from device_api.main import create_app


def test_unreachable_database_aborts_startup(tmp_path):
    settings = Settings(_env_file=None, DB_URI=f"sqlite:///{tmp_path / 'missing' / 'devices.db'}")
    app = create_app(settings)
    with pytest.raises(OperationalError):
        with TestClient(app):
            pass


def test_startup_check_and_bootstrap(tmp_path):
    settings = Settings(_env_file=None, DB_URI=f"sqlite:///{tmp_path / 'devices.db'}", DB_INIT=True)
    app = create_app(settings)
    with TestClient(app) as client:
        r = client.get("/api/devices")
    assert r.status_code == 200
    assert [d["name"] for d in r.json()] == [d["name"] for d in SEED_DEVICES]
    assert r.json()[0] == {"id": 1, "name": "Router-A", "ip_address": "10.0.0.1", "status": "online"}


def test_init_db_only_seeds_empty_table(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'devices.db'}")
    assert init_db(engine) == len(SEED_DEVICES)
    assert init_db(engine) == 0
    engine.dispose()
