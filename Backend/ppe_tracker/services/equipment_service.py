import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from ppe_tracker.models.equipment_model import Equipment
from ppe_tracker.models.equipment_type_model import EquipmentType
from ppe_tracker.models.inspection_model import Inspection
from ppe_tracker.schemas.equipment import EquipmentCreate, EquipmentUpdate
from ppe_tracker.services.errors import NotFoundError, InvalidReferenceError, ReferenceConflictError

logger = logging.getLogger(__name__)


def _equipment_query(db: Session):
    return db.query(Equipment).options(joinedload(Equipment.equipment_type))


def list_equipment(db: Session) -> List[Equipment]:
    return _equipment_query(db).order_by(Equipment.id).all()


def get_equipment(db: Session, equipment_id: int) -> Optional[Equipment]:
    return _equipment_query(db).filter(Equipment.id == equipment_id).first()


def _ensure_type_exists(db: Session, type_id: int) -> None:
    if db.get(EquipmentType, type_id) is None:
        raise InvalidReferenceError(f"Equipment type {type_id} does not exist")


def create_equipment(db: Session, payload: EquipmentCreate) -> Equipment:
    _ensure_type_exists(db, payload.equipment_type_id)

    equipment = Equipment(**payload.model_dump())
    db.add(equipment)
    db.commit()
    logger.info("Created equipment %s (serial %s)", equipment.id, equipment.serial_number)

    # Re-read with the type joined in
    return get_equipment(db, equipment.id)


def update_equipment(db: Session, equipment_id: int, payload: EquipmentUpdate) -> Equipment:
    equipment = db.get(Equipment, equipment_id)
    if equipment is None:
        raise NotFoundError(f"No equipment found with id {equipment_id}")
    _ensure_type_exists(db, payload.equipment_type_id)

    for field, value in payload.model_dump().items():
        setattr(equipment, field, value)
    db.commit()
    logger.info("Updated equipment %s", equipment_id)
    return get_equipment(db, equipment_id)


def delete_equipment(db: Session, equipment_id: int) -> None:
    equipment = db.get(Equipment, equipment_id)
    if equipment is None:
        raise NotFoundError(f"No equipment found with id {equipment_id}")

    if db.query(Inspection.id).filter(Inspection.equipment_id == equipment_id).first():
        raise ReferenceConflictError(f"Equipment {equipment_id} still has recorded inspections")

    db.delete(equipment)
    db.commit()
    logger.info("Deleted equipment %s", equipment_id)
