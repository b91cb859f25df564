from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from ppe_tracker.database import get_db
from ppe_tracker.schemas.manager import ManagerCreate, ManagerUpdate, ManagerResponse
from ppe_tracker.services import manager_service
from ppe_tracker.utils import success_resp, list_resp, parse_id

router = APIRouter(prefix="/api/managers", tags=["managers"])


def _require_id(raw: str) -> int:
    manager_id = parse_id(raw)
    if manager_id is None:
        raise HTTPException(status_code=400, detail="A valid manager id is required")
    return manager_id


@router.get("/")
def get_all_managers(db: Session = Depends(get_db)):
    """Get all managers (credentials are never returned)"""
    managers = manager_service.list_managers(db)
    return list_resp(
        [ManagerResponse.model_validate(m) for m in managers],
        "No manager has been recorded yet",
    )


@router.get("/{manager_id}")
def get_manager(manager_id: str, db: Session = Depends(get_db)):
    parsed = parse_id(manager_id)
    manager = manager_service.get_manager(db, parsed) if parsed else None
    if not manager:
        raise HTTPException(status_code=404, detail=f"No manager found with id {manager_id}")
    return ManagerResponse.model_validate(manager)


@router.post("/", status_code=201)
def create_manager(payload: ManagerCreate, db: Session = Depends(get_db)):
    manager = manager_service.create_manager(db, payload)
    return ManagerResponse.model_validate(manager)


@router.put("/{manager_id}")
def update_manager(manager_id: str, payload: ManagerUpdate, db: Session = Depends(get_db)):
    manager = manager_service.update_manager(db, _require_id(manager_id), payload)
    return success_resp("Manager updated successfully", ManagerResponse.model_validate(manager))


@router.delete("/{manager_id}")
def delete_manager(manager_id: str, db: Session = Depends(get_db)):
    parsed = _require_id(manager_id)
    manager_service.delete_manager(db, parsed)
    return success_resp(f"Manager {parsed} deleted successfully")
