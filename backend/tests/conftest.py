"""
Pytest configuration and shared fixtures
"""
import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bookingmx.database import Base
from bookingmx.dependencies import get_city_dataset, get_city_graph, get_reservation_repository
from bookingmx.graph import SAMPLE_DATA, build_graph
from bookingmx.main import app
from bookingmx.models import orm  # noqa
from bookingmx.repositories import InMemoryReservationRepository
from bookingmx.repositories.sql import SqlReservationRepository
from bookingmx.services import ReservationService

TODAY = date(2030, 6, 1)


@pytest.fixture
def today():
    """Fixed 'today' used by the service clock"""
    return TODAY


@pytest.fixture
def repository():
    """Fresh in-memory reservation store"""
    return InMemoryReservationRepository()


@pytest.fixture
def service(repository, today):
    """Reservation service with a fixed clock"""
    return ReservationService(repository, clock=lambda: today)


@pytest.fixture(scope="function")
def db_engine():
    """In-memory database engine"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def sql_repository(db_engine):
    """SQLAlchemy reservation store on the in-memory engine"""
    return SqlReservationRepository(sessionmaker(autocommit=False, autoflush=False, bind=db_engine))


@pytest.fixture
def sample_graph():
    return build_graph(SAMPLE_DATA["cities"], SAMPLE_DATA["edges"])


@pytest.fixture(scope="function")
def client(repository, sample_graph):
    """Test client on a fresh store and the sample city graph"""
    app.dependency_overrides[get_reservation_repository] = lambda: repository
    app.dependency_overrides[get_city_dataset] = lambda: SAMPLE_DATA
    app.dependency_overrides[get_city_graph] = lambda: sample_graph
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Request helpers ==============

@pytest.fixture
def future_stay():
    """(check_in, check_out) comfortably after the real today"""
    check_in = date.today() + timedelta(days=5)
    return check_in, check_in + timedelta(days=2)


@pytest.fixture
def reservation_payload(future_stay):
    check_in, check_out = future_stay
    return {
        "guestName": "Luis",
        "hotelName": "Hotel Azul",
        "checkIn": check_in.isoformat(),
        "checkOut": check_out.isoformat(),
    }
