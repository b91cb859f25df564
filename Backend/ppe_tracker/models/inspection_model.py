from sqlalchemy import Column, Integer, Date, DateTime, Text, ForeignKey, func
from sqlalchemy.orm import relationship
from ppe_tracker.database import Base


class Inspection(Base):
    __tablename__ = "inspection"

    id = Column(Integer, primary_key=True, autoincrement=True)
    inspection_date = Column(Date, nullable=False, index=True)
    remarks = Column(Text, nullable=True)
    manager_id = Column(Integer, ForeignKey("manager.id"), nullable=False, index=True)
    equipment_id = Column(Integer, ForeignKey("equipment.id"), nullable=False, index=True)
    status_id = Column(Integer, ForeignKey("inspection_status.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    manager = relationship("Manager", lazy="joined")
    equipment = relationship("Equipment", lazy="joined")
    status = relationship("InspectionStatus", lazy="joined")
