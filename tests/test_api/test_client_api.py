"""BandApiClient against the app, end to end."""
from datetime import date

import pytest

from bandtrack.client import ApiError


def test_add_and_fetch_roster(api):
    created = api.add_student("Jane Doe", 2027, "Flute")
    assert created.message == "Student added successfully!"

    roster = api.fetch_roster()
    assert [s.student_id for s in roster] == [created.id]
    assert len(api.roster) == 1


def test_filter_uses_last_fetched_snapshot(api):
    api.add_student("Alice", 2025, "Tuba")
    api.fetch_roster()
    api.add_student("Bob", 2026, "Snare")

    # Bob was created after the fetch, so the snapshot doesn't know him yet
    assert api.filter_roster("bob") == []
    api.fetch_roster()
    assert [s.full_name for s in api.filter_roster("bob")] == ["Bob"]


def test_duplicate_raises_api_error(api):
    api.add_uniform("Jacket", "J-1")
    with pytest.raises(ApiError) as exc_info:
        api.add_uniform("Jacket", "J-1")
    assert exc_info.value.status_code == 409
    assert exc_info.value.message == "Error: A uniform piece with that Item Number already exists."


def test_missing_reference_raises_api_error(api):
    inst = api.add_instrument("Flute", "FL-1")
    with pytest.raises(ApiError) as exc_info:
        api.add_assignment(9999, date(2025, 9, 1), instrument_fk=inst.id)
    assert exc_info.value.status_code == 400


def test_assignment_options_recomputed_after_create(api):
    student = api.add_student("Jane Doe", 2027)
    a = api.add_instrument("Clarinet", "A")
    b = api.add_instrument("Clarinet", "B")
    c = api.add_instrument("Clarinet", "C")
    uni = api.add_uniform("Jacket", "J-1", "M")

    options = api.assignment_options()
    assert [i.instrument_id for i in options.instruments] == [a.id, b.id, c.id]

    api.add_assignment(student.id, date(2025, 9, 1), instrument_fk=b.id, uniform_fk=uni.id)
    options = api.assignment_options()
    assert [i.instrument_id for i in options.instruments] == [a.id, c.id]
    assert options.uniforms == []
    assert [s.student_id for s in options.students] == [student.id]


def test_returned_items_stay_available(api):
    student = api.add_student("Jane Doe", 2027)
    inst = api.add_instrument("Flute", "FL-1")
    api.add_assignment(student.id, date(2024, 9, 1), instrument_fk=inst.id, date_in=date(2025, 5, 30))

    assert [i.instrument_id for i in api.assignment_options().instruments] == [inst.id]
    history = api.fetch_assignments()
    assert history[0].is_active is False
