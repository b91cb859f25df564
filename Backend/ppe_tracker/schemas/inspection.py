from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

from ppe_tracker.schemas.equipment import EquipmentSummary
from ppe_tracker.schemas.manager import ManagerSummary
from ppe_tracker.schemas.inspection_status import InspectionStatusResponse
from ppe_tracker.utils import MAX_ID


class InspectionBase(BaseModel):
    inspection_date: date
    remarks: Optional[str] = None
    manager_id: int = Field(..., gt=0, le=MAX_ID, description="Foreign key: manager.id")
    equipment_id: int = Field(..., gt=0, le=MAX_ID, description="Foreign key: equipment.id")
    status_id: int = Field(..., gt=0, le=MAX_ID, description="Foreign key: inspection_status.id")


class InspectionCreate(InspectionBase):
    class Config:
        json_schema_extra = {
            "example": {
                "inspection_date": "2025-06-12",
                "remarks": "Stitching intact, buckles OK",
                "manager_id": 1,
                "equipment_id": 14,
                "status_id": 1
            }
        }


class InspectionUpdate(InspectionBase):
    pass


class InspectionResponse(InspectionBase):
    id: int
    created_at: Optional[datetime] = None
    manager: ManagerSummary
    equipment: EquipmentSummary
    status: InspectionStatusResponse

    class Config:
        from_attributes = True
