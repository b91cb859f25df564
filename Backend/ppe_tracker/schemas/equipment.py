from pydantic import BaseModel, Field
from typing import Optional
from datetime import date

from ppe_tracker.schemas.equipment_type import EquipmentTypeResponse, MAX_INTERVAL_DAYS
from ppe_tracker.utils import MAX_ID


class EquipmentBase(BaseModel):
    personal_id: str = Field(..., min_length=1, max_length=100)
    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    serial_number: str = Field(..., min_length=1, max_length=100)
    size: Optional[str] = Field(None, max_length=20)
    color: Optional[str] = Field(None, max_length=50)
    purchase_date: Optional[date] = None
    manufacture_date: Optional[date] = None
    commissioning_date: Optional[date] = None
    inspection_interval_days: Optional[int] = Field(None, gt=0, le=MAX_INTERVAL_DAYS, description="Overrides the type's default interval")
    equipment_type_id: int = Field(..., gt=0, le=MAX_ID, description="Foreign key: equipment_type.id")


class EquipmentCreate(EquipmentBase):
    class Config:
        json_schema_extra = {
            "example": {
                "personal_id": "HARN-014",
                "brand": "Petzl",
                "model": "Avao Bod",
                "serial_number": "19A0154871",
                "size": "M",
                "color": "black",
                "purchase_date": "2024-02-01",
                "manufacture_date": "2023-11-15",
                "commissioning_date": "2024-03-01",
                "inspection_interval_days": None,
                "equipment_type_id": 1
            }
        }


# Full replace: omitted optional fields are written as NULL
class EquipmentUpdate(EquipmentBase):
    pass


class EquipmentResponse(EquipmentBase):
    id: int
    equipment_type: EquipmentTypeResponse

    class Config:
        from_attributes = True


# Due-date fields stay null when no due date can be computed
class EquipmentDetailResponse(EquipmentResponse):
    last_inspection_date: Optional[date] = None
    next_inspection_date: Optional[date] = None
    days_remaining: Optional[int] = None
    bucket: Optional[str] = None


class EquipmentSummary(BaseModel):
    id: int
    personal_id: str
    brand: str
    model: str

    class Config:
        from_attributes = True


# ---------------------------------------------------------
# DUE INSPECTIONS
# ---------------------------------------------------------
class DueEquipmentResponse(EquipmentResponse):
    last_inspection_date: Optional[date] = None
    reference_date: date
    interval_days: int
    next_inspection_date: date
    days_remaining: int
    bucket: str


class DueSummaryResponse(BaseModel):
    days_threshold: int
    total: int
    overdue: int
    upcoming: int
    current: int
