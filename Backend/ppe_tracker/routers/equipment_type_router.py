from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from ppe_tracker.database import get_db
from ppe_tracker.schemas.equipment_type import EquipmentTypeCreate, EquipmentTypeUpdate, EquipmentTypeResponse
from ppe_tracker.services import equipment_type_service
from ppe_tracker.utils import success_resp, list_resp, parse_id

router = APIRouter(prefix="/api/equipment-types", tags=["equipment_types"])


def _require_id(raw: str) -> int:
    type_id = parse_id(raw)
    if type_id is None:
        raise HTTPException(status_code=400, detail="A valid equipment type id is required")
    return type_id


@router.get("/")
def get_all_equipment_types(db: Session = Depends(get_db)):
    """Get all equipment types"""
    types = equipment_type_service.list_equipment_types(db)
    return list_resp(
        [EquipmentTypeResponse.model_validate(t) for t in types],
        "No equipment type has been recorded yet",
    )


@router.get("/{type_id}")
def get_equipment_type(type_id: str, db: Session = Depends(get_db)):
    parsed = parse_id(type_id)
    equipment_type = equipment_type_service.get_equipment_type(db, parsed) if parsed else None
    if not equipment_type:
        raise HTTPException(status_code=404, detail=f"No equipment type found with id {type_id}")
    return EquipmentTypeResponse.model_validate(equipment_type)


@router.post("/", status_code=201)
def create_equipment_type(payload: EquipmentTypeCreate, db: Session = Depends(get_db)):
    equipment_type = equipment_type_service.create_equipment_type(db, payload)
    return EquipmentTypeResponse.model_validate(equipment_type)


@router.put("/{type_id}")
def update_equipment_type(type_id: str, payload: EquipmentTypeUpdate, db: Session = Depends(get_db)):
    """Replace every field of an equipment type"""
    equipment_type = equipment_type_service.update_equipment_type(db, _require_id(type_id), payload)
    return success_resp("Equipment type updated successfully", EquipmentTypeResponse.model_validate(equipment_type))


@router.delete("/{type_id}")
def delete_equipment_type(type_id: str, db: Session = Depends(get_db)):
    parsed = _require_id(type_id)
    equipment_type_service.delete_equipment_type(db, parsed)
    return success_resp(f"Equipment type {parsed} deleted successfully")
