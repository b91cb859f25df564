from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from ppe_tracker.database import Base

# Textile PPE (harnesses, lanyards...) must be retired after this many years
TEXTILE_RETIREMENT_YEARS = 10


class EquipmentType(Base):
    __tablename__ = "equipment_type"

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(100), nullable=False)
    inspection_interval_days = Column(Integer, nullable=False)
    is_textile = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    @property
    def mandatory_retirement_years(self):
        return TEXTILE_RETIREMENT_YEARS if self.is_textile else None

    def __repr__(self):
        return f"<EquipmentType id={self.id} label={self.label} interval={self.inspection_interval_days}>"
