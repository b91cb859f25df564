from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from ppe_tracker.database import get_db
from ppe_tracker.schemas.inspection import InspectionCreate, InspectionUpdate, InspectionResponse
from ppe_tracker.services import inspection_service
from ppe_tracker.utils import success_resp, list_resp, parse_id

router = APIRouter(prefix="/api/inspections", tags=["inspections"])


def _require_id(raw: str) -> int:
    inspection_id = parse_id(raw)
    if inspection_id is None:
        raise HTTPException(status_code=400, detail="A valid inspection id is required")
    return inspection_id


@router.get("/")
def get_all_inspections(db: Session = Depends(get_db)):
    """All inspections, newest first, with equipment / manager / status inline"""
    inspections = inspection_service.list_inspections(db)
    return list_resp(
        [InspectionResponse.model_validate(i) for i in inspections],
        "No inspection has been recorded yet",
    )


@router.get("/equipment/{equipment_id}")
def get_inspections_for_equipment(equipment_id: str, db: Session = Depends(get_db)):
    """Inspection history of one equipment item"""
    parsed = parse_id(equipment_id)
    inspections = inspection_service.list_inspections_for_equipment(db, parsed) if parsed else []
    return list_resp(
        [InspectionResponse.model_validate(i) for i in inspections],
        f"No inspection found for equipment {equipment_id}",
    )


@router.get("/{inspection_id}")
def get_inspection(inspection_id: str, db: Session = Depends(get_db)):
    parsed = parse_id(inspection_id)
    inspection = inspection_service.get_inspection(db, parsed) if parsed else None
    if not inspection:
        raise HTTPException(status_code=404, detail=f"No inspection found with id {inspection_id}")
    return InspectionResponse.model_validate(inspection)


@router.post("/", status_code=201)
def create_inspection(payload: InspectionCreate, db: Session = Depends(get_db)):
    inspection = inspection_service.create_inspection(db, payload)
    return InspectionResponse.model_validate(inspection)


@router.put("/{inspection_id}")
def update_inspection(inspection_id: str, payload: InspectionUpdate, db: Session = Depends(get_db)):
    inspection = inspection_service.update_inspection(db, _require_id(inspection_id), payload)
    return success_resp("Inspection updated successfully", InspectionResponse.model_validate(inspection))


@router.delete("/{inspection_id}")
def delete_inspection(inspection_id: str, db: Session = Depends(get_db)):
    parsed = _require_id(inspection_id)
    inspection_service.delete_inspection(db, parsed)
    return success_resp(f"Inspection {parsed} deleted successfully")
