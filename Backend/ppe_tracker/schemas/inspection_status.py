from pydantic import BaseModel, Field


class InspectionStatusBase(BaseModel):
    label: str = Field(..., min_length=1, max_length=50)


class InspectionStatusCreate(InspectionStatusBase):
    pass


class InspectionStatusUpdate(InspectionStatusBase):
    pass


class InspectionStatusResponse(InspectionStatusBase):
    id: int

    class Config:
        from_attributes = True
