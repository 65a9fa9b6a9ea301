"""
Configuration and error translation tests
"""
import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, OperationalError, ProgrammingError

from hostel_allocation.config.settings import Settings
from hostel_allocation.core.exceptions import (
    DatabaseError,
    DuplicateEntryError,
    ErrorCode,
    StoreUnavailableError,
    create_validation_error,
    field_errors_from,
    handle_database_exception,
)


class TestSettings:
    """Environment driven configuration"""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.PORT == 5000
        assert settings.CORS_ORIGINS == ['*']
        assert settings.LOG_FORMAT == 'standard'

    def test_cors_origins_from_comma_list(self):
        settings = Settings(_env_file=None, BACKEND_CORS_ORIGINS='http://a.example.com, http://b.example.com')

        assert settings.CORS_ORIGINS == ['http://a.example.com', 'http://b.example.com']

    def test_cors_origins_comma_list_from_environment(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://a.example.com,http://b.example.com')

        settings = Settings(_env_file=None)

        assert settings.CORS_ORIGINS == ['http://a.example.com', 'http://b.example.com']

    def test_cors_origins_json_from_environment(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["http://a.example.com"]')

        assert Settings(_env_file=None).CORS_ORIGINS == ['http://a.example.com']

    def test_cors_origins_from_json(self):
        settings = Settings(_env_file=None, BACKEND_CORS_ORIGINS='["http://a.example.com"]')

        assert settings.CORS_ORIGINS == ['http://a.example.com']

    def test_log_level_is_normalised(self):
        assert Settings(_env_file=None, LOG_LEVEL='debug').LOG_LEVEL == 'DEBUG'

    def test_unknown_log_format_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, LOG_FORMAT='xml')

    def test_sqlite_detection(self):
        assert Settings(_env_file=None, DATABASE_URL='sqlite:///./x.db').is_sqlite()
        assert not Settings(_env_file=None, DATABASE_URL='postgresql://u:p@localhost/db').is_sqlite()


class TestDatabaseErrorTranslation:
    """SQLAlchemy errors become application errors"""

    def test_integrity_error_is_duplicate(self):
        error = handle_database_exception(IntegrityError('INSERT', {}, Exception('UNIQUE')), 'create', 'students')

        assert isinstance(error, DuplicateEntryError)
        assert error.status_code == 400

    def test_operational_error_is_unavailable(self):
        error = handle_database_exception(OperationalError('SELECT 1', {}, Exception('locked')), 'get_by_id')

        assert isinstance(error, StoreUnavailableError)
        assert error.status_code == 503
        assert error.error_code == ErrorCode.CONNECTION_ERROR

    def test_other_errors_are_generic(self):
        error = handle_database_exception(ProgrammingError('SELECT', {}, Exception('syntax')), 'count', 'rooms')

        assert type(error) is DatabaseError
        assert error.status_code == 500


def test_validation_error_payload():
    field_errors = field_errors_from([
        {'loc': ('body', 'email'), 'msg': 'Field required', 'type': 'missing'},
        {'loc': ('body', 'name'), 'msg': 'String should have at least 1 character', 'type': 'string_too_short'},
    ])

    error = create_validation_error(field_errors).to_dict()['error']

    assert error['code'] == 'VALIDATION_ERROR'
    assert error['message'] == 'Validation failed with 2 error(s): email, name'
    assert error['details']['field_errors']['email'] == ['Field required']
