from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from ppe_tracker.database import get_db
from ppe_tracker.schemas.inspection_status import (
    InspectionStatusCreate,
    InspectionStatusUpdate,
    InspectionStatusResponse,
)
from ppe_tracker.services import inspection_status_service
from ppe_tracker.utils import success_resp, list_resp, parse_id

router = APIRouter(prefix="/api/inspection-statuses", tags=["inspection_statuses"])


def _require_id(raw: str) -> int:
    status_id = parse_id(raw)
    if status_id is None:
        raise HTTPException(status_code=400, detail="A valid inspection status id is required")
    return status_id


@router.get("/")
def get_all_inspection_statuses(db: Session = Depends(get_db)):
    statuses = inspection_status_service.list_inspection_statuses(db)
    return list_resp(
        [InspectionStatusResponse.model_validate(s) for s in statuses],
        "No inspection status has been recorded yet",
    )


@router.get("/{status_id}")
def get_inspection_status(status_id: str, db: Session = Depends(get_db)):
    parsed = parse_id(status_id)
    status = inspection_status_service.get_inspection_status(db, parsed) if parsed else None
    if not status:
        raise HTTPException(status_code=404, detail=f"No inspection status found with id {status_id}")
    return InspectionStatusResponse.model_validate(status)


@router.post("/", status_code=201)
def create_inspection_status(payload: InspectionStatusCreate, db: Session = Depends(get_db)):
    status = inspection_status_service.create_inspection_status(db, payload)
    return InspectionStatusResponse.model_validate(status)


@router.put("/{status_id}")
def update_inspection_status(status_id: str, payload: InspectionStatusUpdate, db: Session = Depends(get_db)):
    status = inspection_status_service.update_inspection_status(db, _require_id(status_id), payload)
    return success_resp("Inspection status updated successfully", InspectionStatusResponse.model_validate(status))


@router.delete("/{status_id}")
def delete_inspection_status(status_id: str, db: Session = Depends(get_db)):
    parsed = _require_id(status_id)
    inspection_status_service.delete_inspection_status(db, parsed)
    return success_resp(f"Inspection status {parsed} deleted successfully")
