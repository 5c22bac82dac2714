from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from bandtrack.database import get_db
from bandtrack.schemas.common import CreatedResponse
from bandtrack.schemas.student import StudentCreate, StudentResponse
import bandtrack.services.roster_service as svc

router = APIRouter(prefix="/roster", tags=["roster"])


@router.get("", response_model=list[StudentResponse])
def list_roster(db: Session = Depends(get_db)):
    return svc.get_roster(db)


@router.post("", response_model=CreatedResponse, status_code=201)
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    student = svc.create_student(db, data)
    return CreatedResponse(message="Student added successfully!", id=student.student_id)
