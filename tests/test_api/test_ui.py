"""Tests for the server-rendered page and its form handlers."""
from datetime import date


def test_index_empty(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "No students found. Add one above!" in res.text
    assert "No instruments found. Add one above!" in res.text
    assert "No uniform pieces found. Add one above!" in res.text
    assert "No active or historical assignments found." in res.text


def test_index_defaults_date_out_to_today(client):
    res = client.get("/")
    assert f'value="{date.today().isoformat()}"' in res.text


def test_add_student_form(client):
    res = client.post("/roster/new", data={"full_name": "Jane Doe", "graduation_year": "2027", "instrument_played": "Flute"})
    assert res.status_code == 200
    assert "Student added successfully!" in res.text
    assert "Jane Doe (2027)" in res.text  # student select option


def test_add_student_form_missing_year_keeps_values(client):
    res = client.post("/roster/new", data={"full_name": "Half Filled", "graduation_year": "", "instrument_played": "Oboe"})
    assert res.status_code == 400
    assert "Required fields are missing: graduation_year." in res.text
    assert 'value="Half Filled"' in res.text
    assert 'value="Oboe"' in res.text


def test_duplicate_uniform_form(client, uniform):
    res = client.post("/uniforms/new", data={"item_type": "Jacket", "item_number": "J-1", "size": "L", "status": ""})
    assert res.status_code == 409
    assert "A uniform piece with that Item Number already exists." in res.text


def test_assignment_form_lists_only_available_items(client, student):
    client.post("/api/instruments", json={"instrument_name": "Clarinet", "instrument_number": "CL-1", "locker_number": "3"}).json()["id"]
    taken = client.post("/api/instruments", json={"instrument_name": "Trumpet", "instrument_number": "TR-1", "locker_number": "4"}).json()["id"]
    client.post("/api/assignments", json={"student_fk": student, "instrument_fk": taken, "date_out": "2025-09-01"})

    page = client.get("/").text
    assert "Clarinet #CL-1 (Locker: 3)" in page
    assert "Trumpet #TR-1 (Locker: 4)" not in page
    assert "Trumpet (#TR-1)" in page  # still shown in the assignment history
    assert "- Active -" in page


def test_add_assignment_form(client, student, instrument):
    res = client.post("/assignments/new", data={
        "student_fk": str(student), "instrument_fk": str(instrument), "uniform_fk": "",
        "date_out": "2025-09-01", "date_in": "",
    })
    assert res.status_code == 200
    assert "Assignment created successfully!" in res.text
    assert "Flute #FL-1" not in res.text


def test_add_assignment_form_without_items(client, student):
    res = client.post("/assignments/new", data={
        "student_fk": str(student), "instrument_fk": "", "uniform_fk": "", "date_out": "2025-09-01", "date_in": "",
    })
    assert res.status_code == 400
    assert "You must select an instrument and/or a uniform piece to assign." in res.text


def test_roster_search_partial(client):
    client.post("/api/roster", json={"full_name": "Alice", "graduation_year": 2025, "instrument_played": "Tuba"})
    client.post("/api/roster", json={"full_name": "Bob", "graduation_year": 2026, "instrument_played": "Snare"})

    res = client.get("/roster/search", params={"search": "25"})
    assert res.status_code == 200
    assert "Alice" in res.text
    assert "Bob" not in res.text

    res = client.get("/roster/search", params={"search": "zzz"})
    assert "No students found matching your search." in res.text


def test_roster_search_uses_roster_from_last_page_load(client):
    client.post("/api/roster", json={"full_name": "Alice", "graduation_year": 2025})
    client.get("/")
    client.post("/api/roster", json={"full_name": "Alicia", "graduation_year": 2026})

    res = client.get("/roster/search", params={"search": "ali"})
    assert "<td>Alice</td>" in res.text
    assert "Alicia" not in res.text

    client.get("/")
    res = client.get("/roster/search", params={"search": "ali"})
    assert "<td>Alicia</td>" in res.text


def test_roster_search_sees_student_added_from_page(client):
    client.get("/")
    client.post("/roster/new", data={"full_name": "Maya Chen", "graduation_year": "2028", "instrument_played": ""})
    res = client.get("/roster/search", params={"search": "maya"})
    assert "<td>Maya Chen</td>" in res.text


def test_export_link_follows_api_prefix(client):
    page = client.get("/").text
    assert f'href="http://testserver{client.app.url_path_for("export_excel")}"' in page
