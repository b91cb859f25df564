import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ppe_tracker.models.manager_model import Manager
from ppe_tracker.models.inspection_model import Inspection
from ppe_tracker.schemas.manager import ManagerCreate, ManagerUpdate
from ppe_tracker.security import hash_password
from ppe_tracker.services.errors import NotFoundError, DuplicateError, ReferenceConflictError

logger = logging.getLogger(__name__)


def list_managers(db: Session) -> List[Manager]:
    return db.query(Manager).order_by(Manager.last_name, Manager.first_name, Manager.id).all()


def get_manager(db: Session, manager_id: int) -> Optional[Manager]:
    return db.get(Manager, manager_id)


def get_manager_by_email(db: Session, email: str) -> Optional[Manager]:
    return db.query(Manager).filter(Manager.email == email).first()


def _ensure_email_free(db: Session, email: str, manager_id: Optional[int] = None) -> None:
    existing = get_manager_by_email(db, email)
    if existing is not None and existing.id != manager_id:
        raise DuplicateError(f"A manager with email {email} already exists")


def create_manager(db: Session, payload: ManagerCreate) -> Manager:
    _ensure_email_free(db, payload.email)

    pwd_hash, salt = hash_password(payload.password)
    manager = Manager(
        last_name=payload.last_name,
        first_name=payload.first_name,
        email=payload.email,
        password_hash=pwd_hash,
        password_salt=salt,
    )
    db.add(manager)
    db.commit()
    logger.info("Created manager %s (%s)", manager.id, manager.email)
    return get_manager(db, manager.id)


def update_manager(db: Session, manager_id: int, payload: ManagerUpdate) -> Manager:
    manager = db.get(Manager, manager_id)
    if manager is None:
        raise NotFoundError(f"No manager found with id {manager_id}")
    _ensure_email_free(db, payload.email, manager_id)

    manager.last_name = payload.last_name
    manager.first_name = payload.first_name
    manager.email = payload.email
    manager.password_hash, manager.password_salt = hash_password(payload.password)
    db.commit()
    logger.info("Updated manager %s", manager_id)
    return get_manager(db, manager_id)


def delete_manager(db: Session, manager_id: int) -> None:
    manager = db.get(Manager, manager_id)
    if manager is None:
        raise NotFoundError(f"No manager found with id {manager_id}")

    if db.query(Inspection.id).filter(Inspection.manager_id == manager_id).first():
        raise ReferenceConflictError(f"Manager {manager_id} still has recorded inspections")

    db.delete(manager)
    db.commit()
    logger.info("Deleted manager %s", manager_id)
