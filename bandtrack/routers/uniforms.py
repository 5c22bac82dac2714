from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from bandtrack.database import get_db
from bandtrack.schemas.common import CreatedResponse
from bandtrack.schemas.uniform import UniformCreate, UniformResponse
import bandtrack.services.uniform_service as svc

router = APIRouter(prefix="/uniforms", tags=["uniforms"])


@router.get("", response_model=list[UniformResponse])
def list_uniforms(db: Session = Depends(get_db)):
    return svc.get_uniforms(db)


@router.post("", response_model=CreatedResponse, status_code=201)
def create_uniform(data: UniformCreate, db: Session = Depends(get_db)):
    piece = svc.create_uniform(db, data)
    return CreatedResponse(message="Uniform added successfully!", id=piece.uniform_id)
