from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session
from bandtrack.database import get_db
import bandtrack.services.export_service as svc

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/excel")
def export_excel(db: Session = Depends(get_db)):
    xlsx_bytes = svc.export_inventory_excel(db)
    return Response(
        content=xlsx_bytes,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=band-inventory.xlsx"},
    )
