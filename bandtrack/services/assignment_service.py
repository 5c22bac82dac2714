from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import DataError
from fastapi import HTTPException
from bandtrack.models.assignment import Assignment
from bandtrack.models.instrument import Instrument
from bandtrack.models.student import Student
from bandtrack.models.uniform import UniformPiece
from bandtrack.schemas.assignment import AssignmentCreate
from bandtrack.services.store import insert_row, read_guard

MISSING_STUDENT_OR_DATE = "A student and the date out are required for an assignment."
MISSING_ITEM = "You must select an instrument and/or a uniform piece to assign."
MISSING_REFERENCE = "Error: One of the selected items (student, instrument, or uniform) does not exist."


def get_assignments(db: Session) -> list[dict]:
    """Full assignment history, newest check-out first.

    Assignments without an instrument or uniform piece still appear, with the
    corresponding columns set to None.
    """
    query = (
        select(
            Assignment.assignment_id,
            Student.student_id,
            Student.full_name.label("student_name"),
            Student.graduation_year,
            Instrument.instrument_id,
            Instrument.instrument_name,
            Instrument.instrument_number,
            UniformPiece.uniform_id,
            UniformPiece.item_type.label("uniform_type"),
            UniformPiece.item_number.label("uniform_item_number"),
            UniformPiece.size.label("uniform_size"),
            Assignment.date_out,
            Assignment.date_in,
        )
        .join(Student, Assignment.student_fk == Student.student_id)
        .outerjoin(Instrument, Assignment.instrument_fk == Instrument.instrument_id)
        .outerjoin(UniformPiece, Assignment.uniform_fk == UniformPiece.uniform_id)
        .order_by(Assignment.date_out.desc(), Assignment.assignment_id.desc())
    )
    with read_guard("assignments", "Error fetching assignment data."):
        return [dict(row) for row in db.execute(query).mappings()]


def get_active_ids(db: Session) -> list[dict]:
    """Instrument and uniform ids attached to assignments with no return date."""
    query = select(
        Assignment.instrument_fk.label("instrument_id"),
        Assignment.uniform_fk.label("uniform_id"),
    ).where(Assignment.date_in.is_(None))
    with read_guard("assignments/active-ids", "Error fetching active item IDs."):
        return [dict(row) for row in db.execute(query).mappings()]


def _exists(db: Session, model: type, key: int) -> bool:
    try:
        return db.get(model, key) is not None
    except (OverflowError, DataError):
        # key outside the id column range, so no row can carry it
        db.rollback()
        return False


def _references_exist(db: Session, data: AssignmentCreate) -> bool:
    if not _exists(db, Student, data.student_fk):
        return False
    if data.instrument_fk is not None and not _exists(db, Instrument, data.instrument_fk):
        return False
    if data.uniform_fk is not None and not _exists(db, UniformPiece, data.uniform_fk):
        return False
    return True


def create_assignment(db: Session, data: AssignmentCreate) -> Assignment:
    if data.student_fk is None or data.date_out is None:
        raise HTTPException(status_code=400, detail=MISSING_STUDENT_OR_DATE)
    if data.instrument_fk is None and data.uniform_fk is None:
        raise HTTPException(status_code=400, detail=MISSING_ITEM)

    with read_guard("assignment references", "Error inserting assignment data."):
        references_ok = _references_exist(db, data)
    if not references_ok:
        raise HTTPException(status_code=400, detail=MISSING_REFERENCE)

    # No check against an already active assignment of the same item: the
    # available-choices filter on the client is the only guard.
    assignment = Assignment(**data.model_dump())
    return insert_row(
        db,
        assignment,
        failure_message="Error inserting assignment data.",
        reference_message=MISSING_REFERENCE,
    )
