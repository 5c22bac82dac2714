"""Seed script: fills the database with sample band inventory."""
from datetime import date

from bandtrack.database import Base, engine, SessionLocal
import bandtrack.models  # noqa: F401 (registers all models)
from bandtrack.models.student import Student
from bandtrack.models.instrument import Instrument
from bandtrack.models.uniform import UniformPiece
from bandtrack.models.assignment import Assignment


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    students_data = [
        ("Ava Martinez", 2026, "Flute"),
        ("Ben Okafor", 2026, "Trumpet"),
        ("Chloe Nguyen", 2027, "Clarinet"),
        ("Diego Alvarez", 2027, "Snare Drum"),
        ("Emma Schultz", 2028, "Alto Saxophone"),
        ("Finn Gallagher", 2028, "Sousaphone"),
    ]
    existing_students = {(s.full_name, s.graduation_year) for s in db.query(Student).all()}
    for name, year, played in students_data:
        if (name, year) not in existing_students:
            db.add(Student(full_name=name, graduation_year=year, instrument_played=played))

    instruments_data = [
        ("Flute", "FL-101", "12", "10-20-30", "Good"),
        ("Trumpet", "TR-204", "31", "05-15-25", "Valve 2 sticky"),
        ("Clarinet", "CL-330", "14", "11-22-33", "New pads 2024"),
        ("Snare Drum", "SD-007", "50", "", "Head replaced"),
        ("Sousaphone", "SO-002", "60", "", "Dent on bell"),
        ("Mellophone", "ME-118", "41", "07-17-27", "Good"),
    ]
    existing_instruments = {(i.instrument_name, i.instrument_number) for i in db.query(Instrument).all()}
    for name, number, locker, code, notes in instruments_data:
        if (name, number) not in existing_instruments:
            db.add(Instrument(instrument_name=name, instrument_number=number,
                              locker_number=locker, locker_code=code, condition_notes=notes))

    uniforms_data = [
        ("Jacket", "J-001", "M", "Good"),
        ("Jacket", "J-002", "L", "Good"),
        ("Bibbers", "B-001", "M", "Needs hem"),
        ("Bibbers", "B-002", "L", "Good"),
        ("Shako", "S-001", "7 1/4", "Good"),
    ]
    existing_uniforms = {u.item_number for u in db.query(UniformPiece).all()}
    for item_type, number, size, status in uniforms_data:
        if number not in existing_uniforms:
            db.add(UniformPiece(item_type=item_type, item_number=number, size=size, status=status))

    db.commit()

    if not db.query(Assignment).first():
        students = {s.full_name: s for s in db.query(Student).all()}
        instruments = {i.instrument_number: i for i in db.query(Instrument).all()}
        uniforms = {u.item_number: u for u in db.query(UniformPiece).all()}
        db.add_all([
            Assignment(student_fk=students["Ava Martinez"].student_id,
                       instrument_fk=instruments["FL-101"].instrument_id,
                       uniform_fk=uniforms["J-001"].uniform_id,
                       date_out=date(2025, 8, 18)),
            Assignment(student_fk=students["Ben Okafor"].student_id,
                       instrument_fk=instruments["TR-204"].instrument_id,
                       date_out=date(2025, 8, 18)),
            Assignment(student_fk=students["Chloe Nguyen"].student_id,
                       uniform_fk=uniforms["B-001"].uniform_id,
                       date_out=date(2024, 8, 19), date_in=date(2025, 5, 30)),
        ])
        db.commit()

    db.close()
    print("Seed finished.")


if __name__ == "__main__":
    seed()
