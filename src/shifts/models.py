# src/shifts/models.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from src.database import Base
from src.pagination.constants import DEFAULT_SHARD


class Shift(Base):
    __tablename__ = "shifts"
    id = Column(Integer, primary_key=True)
    start_at = Column(DateTime(timezone=True), nullable=False)
    end_at = Column(DateTime(timezone=True), nullable=False)
    cancelled_at = Column(DateTime(timezone=True), nullable=True)
    shard = Column(Integer, nullable=False, default=DEFAULT_SHARD, index=True)

    workplace_id = Column(Integer, ForeignKey("workplaces.id"), nullable=False)
    workplace = relationship("Workplace", back_populates="shifts")

    # Null until claimed
    worker_id = Column(Integer, ForeignKey("workers.id"), nullable=True)
    worker = relationship("Worker", back_populates="shifts")
