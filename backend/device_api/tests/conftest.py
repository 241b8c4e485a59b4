import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from device_api.core.config import Settings
from device_api.db.session import Base
from device_api.main import create_app
from device_api.models import device  # noqa


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def make_app(engine):
    def _make(eng=None, **overrides):
        settings = Settings(_env_file=None, DB_CHECK_ON_STARTUP=False, **overrides)
        return create_app(settings, engine=eng or engine)
    return _make


def _insert_devices(engine, rows):
    with engine.begin() as conn:
        for row in rows:
            conn.execute(
                text("INSERT INTO devices (id, name, ip_address, status) VALUES (:id, :name, :ip, :status)"),
                {"id": row[0], "name": row[1], "ip": row[2], "status": row[3]},
            )


@pytest.fixture
def insert_devices():
    return _insert_devices
