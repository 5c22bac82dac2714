from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from bandtrack.database import get_db
from bandtrack.schemas.common import CreatedResponse
from bandtrack.schemas.instrument import InstrumentCreate, InstrumentResponse
import bandtrack.services.instrument_service as svc

router = APIRouter(prefix="/instruments", tags=["instruments"])


@router.get("", response_model=list[InstrumentResponse])
def list_instruments(db: Session = Depends(get_db)):
    return svc.get_instruments(db)


@router.post("", response_model=CreatedResponse, status_code=201)
def create_instrument(data: InstrumentCreate, db: Session = Depends(get_db)):
    instrument = svc.create_instrument(db, data)
    return CreatedResponse(message="Instrument added successfully!", id=instrument.instrument_id)
