from sqlalchemy import Column, Integer, String
from ppe_tracker.database import Base


class InspectionStatus(Base):
    __tablename__ = "inspection_status"

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(50), nullable=False)
