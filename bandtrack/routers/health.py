from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from bandtrack.database import get_db
from bandtrack.services.health_service import get_status

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    return get_status(db)
