import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ppe_tracker.models.equipment_type_model import EquipmentType
from ppe_tracker.models.equipment_model import Equipment
from ppe_tracker.schemas.equipment_type import EquipmentTypeCreate, EquipmentTypeUpdate
from ppe_tracker.services.errors import NotFoundError, ReferenceConflictError

logger = logging.getLogger(__name__)


def list_equipment_types(db: Session) -> List[EquipmentType]:
    return db.query(EquipmentType).order_by(EquipmentType.label, EquipmentType.id).all()


def get_equipment_type(db: Session, type_id: int) -> Optional[EquipmentType]:
    return db.get(EquipmentType, type_id)


def create_equipment_type(db: Session, payload: EquipmentTypeCreate) -> EquipmentType:
    equipment_type = EquipmentType(**payload.model_dump())
    db.add(equipment_type)
    db.commit()
    logger.info("Created equipment type %s (%s)", equipment_type.id, equipment_type.label)
    return get_equipment_type(db, equipment_type.id)


def update_equipment_type(db: Session, type_id: int, payload: EquipmentTypeUpdate) -> EquipmentType:
    equipment_type = db.get(EquipmentType, type_id)
    if equipment_type is None:
        raise NotFoundError(f"No equipment type found with id {type_id}")

    for field, value in payload.model_dump().items():
        setattr(equipment_type, field, value)
    db.commit()
    logger.info("Updated equipment type %s", type_id)
    return get_equipment_type(db, type_id)


def delete_equipment_type(db: Session, type_id: int) -> None:
    equipment_type = db.get(EquipmentType, type_id)
    if equipment_type is None:
        raise NotFoundError(f"No equipment type found with id {type_id}")

    in_use = db.query(Equipment.id).filter(Equipment.equipment_type_id == type_id).first()
    if in_use:
        raise ReferenceConflictError(f"Equipment type {type_id} is still used by equipment items")

    db.delete(equipment_type)
    db.commit()
    logger.info("Deleted equipment type %s", type_id)
