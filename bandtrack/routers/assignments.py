from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from bandtrack.database import get_db
from bandtrack.schemas.assignment import ActiveIds, AssignmentCreate, AssignmentRow
from bandtrack.schemas.common import CreatedResponse
import bandtrack.services.assignment_service as svc

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.get("", response_model=list[AssignmentRow])
def list_assignments(db: Session = Depends(get_db)):
    return svc.get_assignments(db)


@router.get("/active-ids", response_model=list[ActiveIds])
def active_ids(db: Session = Depends(get_db)):
    return svc.get_active_ids(db)


@router.post("", response_model=CreatedResponse, status_code=201)
def create_assignment(data: AssignmentCreate, db: Session = Depends(get_db)):
    assignment = svc.create_assignment(db, data)
    return CreatedResponse(message="Assignment created successfully!", id=assignment.assignment_id)
