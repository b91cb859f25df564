from pydantic import BaseModel, Field
from typing import Optional

# 100 years
MAX_INTERVAL_DAYS = 36500


class EquipmentTypeBase(BaseModel):
    label: str = Field(..., min_length=1, max_length=100)
    inspection_interval_days: int = Field(..., gt=0, le=MAX_INTERVAL_DAYS, description="Default inspection interval in days")
    is_textile: bool = False


# ---------------------------------------------------------
# CREATE / UPDATE: updates replace every field
# ---------------------------------------------------------
class EquipmentTypeCreate(EquipmentTypeBase):
    class Config:
        json_schema_extra = {
            "example": {
                "label": "Harness",
                "inspection_interval_days": 180,
                "is_textile": True
            }
        }


class EquipmentTypeUpdate(EquipmentTypeBase):
    pass


class EquipmentTypeResponse(EquipmentTypeBase):
    id: int
    mandatory_retirement_years: Optional[int] = None

    class Config:
        from_attributes = True
