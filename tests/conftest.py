import datetime as dt
import os

# keep the module-level engine off postgres while the app is imported
os.environ.setdefault("DB_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from packetboard.app import app
from packetboard.deps import get_db
from packetboard.models.base import Base
from packetboard.models.packet_info import PacketInfo

CHECKED_AT = dt.datetime(2024, 3, 16, 8, 0, 0)


def make_packet(id, **overrides):
    fields = dict(
        id=id, version="IPv4", total_length=60, flags="DF", ttl=64, protocol="TCP",
        header_checksum=0xB1E6, source_ip=f"10.0.0.{id}", destination_ip="192.168.1.10",
        malicious=0, suspicious=0, harmless=70, undetected=20,
        scan_date=dt.datetime(2024, 3, 15, 10, 30, 0), checked_at=CHECKED_AT,
    )
    fields.update(overrides)
    return PacketInfo(**fields)


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed(db):
    def _seed(*packets):
        db.add_all(packets)
        db.commit()
    return _seed


@pytest.fixture
def broken_db(tmp_path):
    eng = create_engine(f"sqlite:///{tmp_path}/missing/dir/packets.db")
    session = sessionmaker(bind=eng)()
    try:
        yield session
    finally:
        session.close()
        eng.dispose()


def _client_for(session):
    def _get_db():
        yield session
    app.dependency_overrides[get_db] = _get_db
    return TestClient(app)


@pytest.fixture
def client(db):
    yield _client_for(db)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(broken_db):
    yield _client_for(broken_db)
    app.dependency_overrides.clear()
