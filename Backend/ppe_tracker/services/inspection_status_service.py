import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ppe_tracker.models.inspection_status_model import InspectionStatus
from ppe_tracker.models.inspection_model import Inspection
from ppe_tracker.schemas.inspection_status import InspectionStatusCreate, InspectionStatusUpdate
from ppe_tracker.services.errors import NotFoundError, ReferenceConflictError

logger = logging.getLogger(__name__)


def list_inspection_statuses(db: Session) -> List[InspectionStatus]:
    return db.query(InspectionStatus).order_by(InspectionStatus.id).all()


def get_inspection_status(db: Session, status_id: int) -> Optional[InspectionStatus]:
    return db.get(InspectionStatus, status_id)


def create_inspection_status(db: Session, payload: InspectionStatusCreate) -> InspectionStatus:
    status = InspectionStatus(label=payload.label)
    db.add(status)
    db.commit()
    logger.info("Created inspection status %s (%s)", status.id, status.label)
    return get_inspection_status(db, status.id)


def update_inspection_status(db: Session, status_id: int, payload: InspectionStatusUpdate) -> InspectionStatus:
    status = db.get(InspectionStatus, status_id)
    if status is None:
        raise NotFoundError(f"No inspection status found with id {status_id}")

    status.label = payload.label
    db.commit()
    logger.info("Updated inspection status %s", status_id)
    return get_inspection_status(db, status_id)


def delete_inspection_status(db: Session, status_id: int) -> None:
    status = db.get(InspectionStatus, status_id)
    if status is None:
        raise NotFoundError(f"No inspection status found with id {status_id}")

    if db.query(Inspection.id).filter(Inspection.status_id == status_id).first():
        raise ReferenceConflictError(f"Inspection status {status_id} is still used by inspections")

    db.delete(status)
    db.commit()
    logger.info("Deleted inspection status %s", status_id)
