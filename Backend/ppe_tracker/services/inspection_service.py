import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from ppe_tracker.models.inspection_model import Inspection
from ppe_tracker.models.equipment_model import Equipment
from ppe_tracker.models.manager_model import Manager
from ppe_tracker.models.inspection_status_model import InspectionStatus
from ppe_tracker.schemas.inspection import InspectionBase, InspectionCreate, InspectionUpdate
from ppe_tracker.services.errors import NotFoundError, InvalidReferenceError

logger = logging.getLogger(__name__)


def _inspection_query(db: Session):
    return db.query(Inspection).options(
        joinedload(Inspection.manager),
        joinedload(Inspection.equipment),
        joinedload(Inspection.status),
    )


def list_inspections(db: Session) -> List[Inspection]:
    return _inspection_query(db).order_by(Inspection.inspection_date.desc(), Inspection.id.desc()).all()


def list_inspections_for_equipment(db: Session, equipment_id: int) -> List[Inspection]:
    return (
        _inspection_query(db)
        .filter(Inspection.equipment_id == equipment_id)
        .order_by(Inspection.inspection_date.desc(), Inspection.id.desc())
        .all()
    )


def get_inspection(db: Session, inspection_id: int) -> Optional[Inspection]:
    return _inspection_query(db).filter(Inspection.id == inspection_id).first()


def _ensure_references_exist(db: Session, payload: InspectionBase) -> None:
    missing = []
    if db.get(Manager, payload.manager_id) is None:
        missing.append(f"manager {payload.manager_id}")
    if db.get(Equipment, payload.equipment_id) is None:
        missing.append(f"equipment {payload.equipment_id}")
    if db.get(InspectionStatus, payload.status_id) is None:
        missing.append(f"inspection status {payload.status_id}")
    if missing:
        raise InvalidReferenceError(f"Unknown {', '.join(missing)}")


def create_inspection(db: Session, payload: InspectionCreate) -> Inspection:
    _ensure_references_exist(db, payload)

    inspection = Inspection(**payload.model_dump())
    db.add(inspection)
    db.commit()
    logger.info(
        "Recorded inspection %s for equipment %s on %s",
        inspection.id, inspection.equipment_id, inspection.inspection_date,
    )
    return get_inspection(db, inspection.id)


def update_inspection(db: Session, inspection_id: int, payload: InspectionUpdate) -> Inspection:
    inspection = db.get(Inspection, inspection_id)
    if inspection is None:
        raise NotFoundError(f"No inspection found with id {inspection_id}")
    _ensure_references_exist(db, payload)

    for field, value in payload.model_dump().items():
        setattr(inspection, field, value)
    db.commit()
    logger.info("Updated inspection %s", inspection_id)
    return get_inspection(db, inspection_id)


def delete_inspection(db: Session, inspection_id: int) -> None:
    inspection = db.get(Inspection, inspection_id)
    if inspection is None:
        raise NotFoundError(f"No inspection found with id {inspection_id}")

    db.delete(inspection)
    db.commit()
    logger.info("Deleted inspection %s", inspection_id)
