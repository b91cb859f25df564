"""
Due-inspection computation.

An item's next inspection is due ``interval`` days after its reference date:
the date of its most recent inspection or, when it was never inspected, its
commissioning date. Items with neither date, or without a positive interval,
have no computable due date and are left out.

All date arithmetic happens here, in Python, so the API, the dashboard summary
and the Excel export share one boundary rule: an item is due when
``days_remaining <= days_threshold``.
"""
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from ppe_tracker.models.equipment_model import Equipment
from ppe_tracker.models.inspection_model import Inspection

logger = logging.getLogger(__name__)

DEFAULT_DAYS_THRESHOLD = 30
UPCOMING_WINDOW_DAYS = 15

BUCKET_OVERDUE = "overdue"
BUCKET_UPCOMING = "upcoming"
BUCKET_CURRENT = "current"


@dataclass
class DueInfo:
    reference_date: date
    last_inspection_date: Optional[date]
    interval_days: int
    next_inspection_date: date
    days_remaining: int

    @property
    def bucket(self) -> str:
        return classify_days_remaining(self.days_remaining)


def classify_days_remaining(days_remaining: int) -> str:
    if days_remaining < 0:
        return BUCKET_OVERDUE
    if days_remaining <= UPCOMING_WINDOW_DAYS:
        return BUCKET_UPCOMING
    return BUCKET_CURRENT


def effective_interval(equipment: Equipment) -> Optional[int]:
    """Per-item interval when set and positive, else the type's default."""
    if equipment.inspection_interval_days and equipment.inspection_interval_days > 0:
        return equipment.inspection_interval_days
    if equipment.equipment_type is not None:
        return equipment.equipment_type.inspection_interval_days
    return None


def _as_date(value) -> Optional[date]:
    # SQLite hands MAX() over a DATE column back as text
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def compute_due_info(
    equipment: Equipment,
    last_inspection_date: Optional[date],
    today: date,
) -> Optional[DueInfo]:
    reference_date = last_inspection_date or equipment.commissioning_date
    if reference_date is None:
        return None

    interval = effective_interval(equipment)
    if interval is None or interval <= 0:
        return None

    try:
        next_due = reference_date + timedelta(days=interval)
    except OverflowError:
        # lands past date.max
        return None
    return DueInfo(
        reference_date=reference_date,
        last_inspection_date=last_inspection_date,
        interval_days=interval,
        next_inspection_date=next_due,
        days_remaining=(next_due - today).days,
    )


def is_due(info: DueInfo, days_threshold: int) -> bool:
    return info.days_remaining <= days_threshold


def latest_inspection_dates(db: Session):
    """Subquery: (equipment_id, last_inspection_date) per inspected item."""
    return (
        db.query(
            Inspection.equipment_id.label("equipment_id"),
            func.max(Inspection.inspection_date).label("last_inspection_date"),
        )
        .group_by(Inspection.equipment_id)
        .subquery()
    )


def find_due_equipment(
    db: Session,
    days_threshold: int = DEFAULT_DAYS_THRESHOLD,
    today: Optional[date] = None,
) -> List[Tuple[Equipment, DueInfo]]:
    """Equipment whose next inspection falls within ``days_threshold`` days (or is overdue), most urgent first."""
    today = today or date.today()
    latest = latest_inspection_dates(db)

    rows = (
        db.query(Equipment, latest.c.last_inspection_date)
        .options(joinedload(Equipment.equipment_type))
        .outerjoin(latest, latest.c.equipment_id == Equipment.id)
        .all()
    )

    due = []
    skipped = 0
    for equipment, last_inspection in rows:
        info = compute_due_info(equipment, _as_date(last_inspection), today)
        if info is None:
            skipped += 1
            continue
        if is_due(info, days_threshold):
            due.append((equipment, info))

    due.sort(key=lambda pair: (pair[1].days_remaining, pair[0].id))
    logger.debug(
        "Due inspections: %d due within %d days, %d without computable due date",
        len(due), days_threshold, skipped,
    )
    return due


def summarize_due(items: List[Tuple[Equipment, DueInfo]], days_threshold: int) -> dict:
    counts = {BUCKET_OVERDUE: 0, BUCKET_UPCOMING: 0, BUCKET_CURRENT: 0}
    for _, info in items:
        counts[info.bucket] += 1
    return {
        "days_threshold": days_threshold,
        "total": len(items),
        **counts,
    }


def due_status_by_equipment(
    db: Session,
    items: List[Equipment],
    today: Optional[date] = None,
) -> Dict[int, Tuple[Optional[date], Optional[DueInfo]]]:
    """Last inspection date and due info (None when not computable) for each item, whatever its threshold."""
    today = today or date.today()
    if not items:
        return {}
    latest = latest_inspection_dates(db)
    last_dates = {
        equipment_id: _as_date(last_inspection)
        for equipment_id, last_inspection in db.query(latest.c.equipment_id, latest.c.last_inspection_date)
        .filter(latest.c.equipment_id.in_([e.id for e in items]))
        .all()
    }

    status = {}
    for equipment in items:
        last_inspection = last_dates.get(equipment.id)
        status[equipment.id] = (last_inspection, compute_due_info(equipment, last_inspection, today))
    return status
