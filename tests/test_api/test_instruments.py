"""API tests for /api/instruments."""


def test_create_instrument(client):
    res = client.post("/api/instruments", json={
        "instrument_name": "Trumpet",
        "instrument_number": "TR-204",
        "locker_number": "31",
        "locker_code": "05-15-25",
        "condition_notes": "Valve 2 sticky",
    })
    assert res.status_code == 201
    assert res.json()["message"] == "Instrument added successfully!"

    listed = client.get("/api/instruments").json()
    assert listed[0]["instrument_id"] == res.json()["id"]
    assert listed[0]["locker_code"] == "05-15-25"


def test_instruments_sorted_by_name_then_number(client):
    client.post("/api/instruments", json={"instrument_name": "Trumpet", "instrument_number": "2"})
    client.post("/api/instruments", json={"instrument_name": "Clarinet", "instrument_number": "9"})
    client.post("/api/instruments", json={"instrument_name": "Trumpet", "instrument_number": "1"})

    rows = [(i["instrument_name"], i["instrument_number"]) for i in client.get("/api/instruments").json()]
    assert rows == [("Clarinet", "9"), ("Trumpet", "1"), ("Trumpet", "2")]


def test_numeric_instrument_number_accepted(client):
    res = client.post("/api/instruments", json={"instrument_name": "Tuba", "instrument_number": 7})
    assert res.status_code == 201
    assert client.get("/api/instruments").json()[0]["instrument_number"] == "7"


def test_missing_number(client):
    res = client.post("/api/instruments", json={"instrument_name": "Flute"})
    assert res.status_code == 400
    assert "instrument_number" in res.json()["message"]


def test_duplicate_instrument_conflict(client):
    payload = {"instrument_name": "Flute", "instrument_number": "FL-1"}
    client.post("/api/instruments", json=payload)
    res = client.post("/api/instruments", json=payload)
    assert res.status_code == 409
    assert res.json()["message"] == "Error: An instrument with that number already exists."
    assert len(client.get("/api/instruments").json()) == 1
