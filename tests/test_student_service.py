"""
Student directory tests
"""
import pytest

from hostel_allocation.core.exceptions import (
    DuplicateEntryError,
    ErrorCode,
    StudentNotFoundError,
    ValidationError,
)
from hostel_allocation.services import StudentService


def test_register_student_assigns_id(db_session):
    student = StudentService(db_session).register({
        'name': 'John Doe',
        'email': 'john@example.com',
        'phone': '555-0100',
    })

    assert isinstance(student.id, int)
    assert student.name == 'John Doe'
    assert student.email == 'john@example.com'
    assert student.phone == '555-0100'


def test_second_registration_with_same_email_is_rejected(db_session):
    service = StudentService(db_session)
    service.register({'name': 'John Doe', 'email': 'john@example.com'})

    with pytest.raises(DuplicateEntryError) as exc_info:
        service.register({'name': 'Johnny', 'email': 'john@example.com'})

    assert exc_info.value.message == 'Email already registered'
    assert exc_info.value.details['field'] == 'email'
    assert len(service.list_students()) == 1


def test_email_uniqueness_ignores_case(db_session):
    service = StudentService(db_session)
    first = service.register({'name': 'Jane Roe', 'email': 'Jane.Roe@Example.com'})

    assert first.email == 'jane.roe@example.com'
    with pytest.raises(DuplicateEntryError):
        service.register({'name': 'Jane Roe', 'email': 'JANE.ROE@EXAMPLE.COM'})


def test_blank_phone_is_stored_as_null(db_session):
    student = StudentService(db_session).register({
        'name': 'No Phone',
        'email': 'nophone@example.com',
        'phone': '   ',
    })

    assert student.phone is None


@pytest.mark.parametrize('payload, field', [
    ({'email': 'a@example.com'}, 'name'),
    ({'name': '', 'email': 'a@example.com'}, 'name'),
    ({'name': 'Ann'}, 'email'),
    ({'name': 'Ann', 'email': 'not-an-email'}, 'email'),
])
def test_invalid_registration_is_rejected(db_session, payload, field):
    service = StudentService(db_session)

    with pytest.raises(ValidationError) as exc_info:
        service.register(payload)

    assert exc_info.value.error_code == ErrorCode.VALIDATION_ERROR
    assert field in exc_info.value.details['field_errors']
    assert service.list_students() == []


def test_list_students_round_trip(db_session, make_student):
    for _ in range(3):
        make_student()
    service = StudentService(db_session)

    listed = service.list_students()

    assert len(listed) == 3
    assert [s.id for s in listed] == sorted(s.id for s in listed)
    for student in listed:
        assert service.get_student(student.id).to_dict() == student.to_dict()


def test_unknown_student_is_not_found(db_session):
    with pytest.raises(StudentNotFoundError) as exc_info:
        StudentService(db_session).get_student(42)

    assert exc_info.value.status_code == 404
    assert exc_info.value.details['resource_id'] == 42
