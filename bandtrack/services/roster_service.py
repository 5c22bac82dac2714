from sqlalchemy.orm import Session
from sqlalchemy import select
from bandtrack.models.student import Student
from bandtrack.schemas.student import StudentCreate
from bandtrack.services.store import insert_row, read_guard


def get_roster(db: Session) -> list[Student]:
    with read_guard("roster", "Error fetching roster data."):
        return db.scalars(
            select(Student).order_by(Student.graduation_year, Student.full_name)
        ).all()


def create_student(db: Session, data: StudentCreate) -> Student:
    student = Student(**data.model_dump())
    return insert_row(
        db,
        student,
        failure_message="Error inserting new student data.",
        conflict_message="Error: This student already exists.",
    )
