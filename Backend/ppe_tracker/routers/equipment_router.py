from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from ppe_tracker.database import get_db
from ppe_tracker.schemas.equipment import (
    EquipmentCreate,
    EquipmentUpdate,
    EquipmentResponse,
    EquipmentDetailResponse,
    DueEquipmentResponse,
    DueSummaryResponse,
)
from ppe_tracker.services import equipment_service
from ppe_tracker.services.due_inspections import (
    DEFAULT_DAYS_THRESHOLD,
    due_status_by_equipment,
    find_due_equipment,
    summarize_due,
)
from ppe_tracker.services.due_export import build_due_workbook
from ppe_tracker.utils import success_resp, list_resp, parse_id

router = APIRouter(prefix="/api/equipment", tags=["equipment"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _require_id(raw: str) -> int:
    equipment_id = parse_id(raw)
    if equipment_id is None:
        raise HTTPException(status_code=400, detail="A valid equipment id is required")
    return equipment_id


def days_threshold_param(
    days_threshold: Optional[int] = Query(None, ge=0, description="Look-ahead window in days"),
    daysThreshold: Optional[int] = Query(None, ge=0, include_in_schema=False),
) -> int:
    # camelCase spelling kept for clients of the first API version
    if days_threshold is not None:
        return days_threshold
    if daysThreshold is not None:
        return daysThreshold
    return DEFAULT_DAYS_THRESHOLD


def _due_row(equipment, info) -> DueEquipmentResponse:
    base = EquipmentResponse.model_validate(equipment).model_dump()
    return DueEquipmentResponse(
        **base,
        last_inspection_date=info.last_inspection_date,
        reference_date=info.reference_date,
        interval_days=info.interval_days,
        next_inspection_date=info.next_inspection_date,
        days_remaining=info.days_remaining,
        bucket=info.bucket,
    )


def _detail_rows(db: Session, items) -> list:
    status = due_status_by_equipment(db, items)
    rows = []
    for equipment in items:
        last_inspection, info = status[equipment.id]
        rows.append(EquipmentDetailResponse(
            **EquipmentResponse.model_validate(equipment).model_dump(),
            last_inspection_date=last_inspection,
            next_inspection_date=info.next_inspection_date if info else None,
            days_remaining=info.days_remaining if info else None,
            bucket=info.bucket if info else None,
        ))
    return rows


@router.get("/")
def get_all_equipment(db: Session = Depends(get_db)):
    """Get all equipment items with their type and inspection schedule inline"""
    items = equipment_service.list_equipment(db)
    return list_resp(
        _detail_rows(db, items),
        "No equipment has been recorded yet",
    )


# ----------------------------
# DUE INSPECTIONS (declared before /{equipment_id})
# ----------------------------
@router.get("/due")
def get_due_equipment(days_threshold: int = Depends(days_threshold_param), db: Session = Depends(get_db)):
    """Equipment whose next inspection is overdue or due within `days_threshold` days"""
    due = find_due_equipment(db, days_threshold)
    return list_resp(
        [_due_row(equipment, info) for equipment, info in due],
        f"No equipment needs an inspection within {days_threshold} days",
    )


@router.get("/due/summary")
def get_due_summary(days_threshold: int = Depends(days_threshold_param), db: Session = Depends(get_db)):
    """Dashboard counters: overdue / upcoming (<= 15 days) / current"""
    due = find_due_equipment(db, days_threshold)
    return DueSummaryResponse(**summarize_due(due, days_threshold))


@router.get("/due/export")
def export_due_equipment(days_threshold: int = Depends(days_threshold_param), db: Session = Depends(get_db)):
    """Export the due-inspection list to an Excel file"""
    due = find_due_equipment(db, days_threshold)
    content = build_due_workbook(due, days_threshold)
    filename = f"due_inspections_{datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{equipment_id}")
def get_equipment(equipment_id: str, db: Session = Depends(get_db)):
    parsed = parse_id(equipment_id)
    equipment = equipment_service.get_equipment(db, parsed) if parsed else None
    if not equipment:
        raise HTTPException(status_code=404, detail=f"No equipment found with id {equipment_id}")
    return _detail_rows(db, [equipment])[0]


@router.post("/", status_code=201)
def create_equipment(payload: EquipmentCreate, db: Session = Depends(get_db)):
    equipment = equipment_service.create_equipment(db, payload)
    return EquipmentResponse.model_validate(equipment)


@router.put("/{equipment_id}")
def update_equipment(equipment_id: str, payload: EquipmentUpdate, db: Session = Depends(get_db)):
    """Replace every field of an equipment item; omitted optional fields become null"""
    equipment = equipment_service.update_equipment(db, _require_id(equipment_id), payload)
    return success_resp("Equipment updated successfully", EquipmentResponse.model_validate(equipment))


@router.delete("/{equipment_id}")
def delete_equipment(equipment_id: str, db: Session = Depends(get_db)):
    parsed = _require_id(equipment_id)
    equipment_service.delete_equipment(db, parsed)
    return success_resp(f"Equipment {parsed} deleted successfully")
