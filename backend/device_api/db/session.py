import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

logger = logging.getLogger(__name__)

class Base(DeclarativeBase): pass

SEED_DEVICES = [
    {"name": "Router-A", "ip_address": "10.0.0.1", "status": "online"},
    {"name": "Switch-B", "ip_address": "10.0.0.2", "status": "offline"},
    {"name": "Firewall-C", "ip_address": "10.0.0.3", "status": "online"},
    {"name": "AccessPoint-D", "ip_address": "10.0.1.10", "status": "maintenance"},
]


def build_engine(uri: str) -> Engine:
    connect_args = {"check_same_thread": False} if uri.startswith("sqlite") else {}
    return create_engine(uri, pool_pre_ping=True, connect_args=connect_args)


def check_connection(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def init_db(engine: Engine) -> int:
    """Create the devices table and seed it when empty. Returns rows added."""
    from ..models.device import Device
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    db = SessionLocal()
    try:
        if db.query(Device).first():
            return 0
        for device_data in SEED_DEVICES:
            db.add(Device(**device_data))
        db.commit()
        logger.info("seeded %d devices", len(SEED_DEVICES))
        return len(SEED_DEVICES)
    finally:
        db.close()


def get_db(request: Request):
    db = request.app.state.session_factory()
    try: yield db
    finally: db.close()
