"""
Hostel Allocation - Test Configuration and Fixtures
"""
import os
from typing import Callable, Generator

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['INIT_DB_ON_STARTUP'] = 'false'
os.environ['LOG_LEVEL'] = 'WARNING'
os.environ['ENABLE_METRICS'] = 'true'

from hostel_allocation.db.init_db import drop_db, init_db
from hostel_allocation.db.session import build_engine, get_db
from hostel_allocation.main import app
from hostel_allocation.models import Room, Student
from hostel_allocation.services import RoomService, StudentService

fake = Faker()

# Test database setup: one in-memory database shared by every connection
test_engine = build_engine('sqlite://', poolclass=StaticPool)
TestSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture(scope='function')
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database for each test"""
    init_db(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        drop_db(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_room(db_session: Session) -> Callable[..., Room]:
    """Factory creating rooms through the room directory"""
    service = RoomService(db_session)

    def _make_room(room_number: str = None, capacity: int = 2, floor: int = None) -> Room:
        return service.create({
            'room_number': room_number or fake.unique.bothify(text='R-###'),
            'capacity': capacity,
            'floor': floor,
        })

    return _make_room


@pytest.fixture
def make_student(db_session: Session) -> Callable[..., Student]:
    """Factory registering students through the student directory"""
    service = StudentService(db_session)

    def _make_student(name: str = None, email: str = None, phone: str = None) -> Student:
        return service.register({
            'name': name or fake.name(),
            'email': email or fake.unique.email(),
            'phone': phone,
        })

    return _make_student
