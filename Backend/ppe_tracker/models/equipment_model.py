from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from ppe_tracker.database import Base


class Equipment(Base):
    """
    A single tracked PPE item.
    - inspection_interval_days: optional per-item override of the type's default interval
    - commissioning_date: reference date for the first inspection when none was recorded yet
    """
    __tablename__ = "equipment"

    id = Column(Integer, primary_key=True, autoincrement=True)
    personal_id = Column(String(100), nullable=False)
    brand = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    serial_number = Column(String(100), nullable=False)
    size = Column(String(20), nullable=True)
    color = Column(String(50), nullable=True)
    purchase_date = Column(Date, nullable=True)
    manufacture_date = Column(Date, nullable=True)
    commissioning_date = Column(Date, nullable=True)
    inspection_interval_days = Column(Integer, nullable=True)
    equipment_type_id = Column(Integer, ForeignKey("equipment_type.id"), nullable=False, index=True)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    equipment_type = relationship("EquipmentType", lazy="joined")

    def __repr__(self):
        return f"<Equipment id={self.id} personal_id={self.personal_id} serial={self.serial_number}>"
