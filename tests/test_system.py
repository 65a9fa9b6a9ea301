"""
Landing page, health, readiness and metrics
"""
import pytest
from fastapi.testclient import TestClient

from hostel_allocation.api.routes import system
from hostel_allocation.db.session import get_db
from hostel_allocation.main import app, create_app


def test_landing_page(client):
    response = client.get('/')

    assert response.status_code == 200
    assert response.headers['content-type'].startswith('text/html')
    assert 'Hostel Room Allocation' in response.text
    assert '/static/app.js' in response.text


def test_static_assets_are_served(client):
    assert client.get('/static/app.js').status_code == 200
    assert client.get('/static/styles.css').status_code == 200


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json() == {'status': 'ok', 'database': 'connected'}


def test_health_when_database_unreachable(client, monkeypatch):
    monkeypatch.setattr(system, 'ping', lambda db: False)

    response = client.get('/health')

    assert response.status_code == 503
    assert response.json() == {'status': 'unhealthy', 'database': 'disconnected'}


def test_ready(client):
    response = client.get('/ready')

    assert response.status_code == 200
    assert response.json() == {'ready': True}


def test_not_ready_when_database_unreachable(client, monkeypatch):
    monkeypatch.setattr(system, 'ping', lambda db: False)

    response = client.get('/ready')

    assert response.status_code == 503
    assert response.json() == {'ready': False}


@pytest.fixture
def fresh_client(db_session):
    """Client on a newly built app, so counters start from zero"""
    fresh_app = create_app()
    fresh_app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(fresh_app) as test_client:
        yield test_client


def test_metrics_of_fresh_app_start_at_zero(fresh_client):
    text = fresh_client.get('/metrics').text

    assert 'http_requests_total{job="hostel-allocation"} 0.0' in text
    assert 'http_errors_total{job="hostel-allocation"} 0.0' in text
    assert 'db_connection_status 1.0' in text


def test_metrics_count_requests_and_errors(fresh_client):
    fresh_client.get('/admin/rooms')
    fresh_client.get('/student/999')

    response = fresh_client.get('/metrics')

    assert response.status_code == 200
    assert response.headers['content-type'].startswith('text/plain')
    assert 'http_requests_total{job="hostel-allocation"} 2.0' in response.text
    assert 'http_errors_total{job="hostel-allocation"} 1.0' in response.text


def test_operational_endpoints_are_not_counted(fresh_client):
    fresh_client.get('/health')
    fresh_client.get('/ready')
    fresh_client.get('/metrics')

    text = fresh_client.get('/metrics').text

    assert 'http_requests_total{job="hostel-allocation"} 0.0' in text


def test_metrics_gauge_drops_when_database_unreachable(client, monkeypatch):
    monkeypatch.setattr(system, 'ping', lambda db: False)

    text = client.get('/metrics').text

    assert 'db_connection_status 0.0' in text


def test_request_counters_track_errors(client):
    tracker = app.state.metrics
    requests_before = tracker.total_requests()
    errors_before = tracker.total_errors()

    client.get('/admin/rooms')
    client.get('/admin/rooms/999')

    assert tracker.total_requests() == requests_before + 2
    assert tracker.total_errors() == errors_before + 1


def test_request_id_header(client):
    response = client.get('/health', headers={'X-Request-ID': 'abc-123'})

    assert response.headers['X-Request-ID'] == 'abc-123'
    assert 'X-Process-Time' in response.headers


def test_landing_page_has_room_and_student_search(client):
    page = client.get('/').text
    script = client.get('/static/app.js').text

    assert 'id="roomSearch"' in page
    assert 'id="studentSearch"' in page
    assert 'function filterRooms' in script
    assert 'function filterStudents' in script
