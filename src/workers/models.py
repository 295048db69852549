# src/workers/models.py
import enum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.pagination.constants import DEFAULT_SHARD


class WorkerStatus(enum.IntEnum):
    ACTIVE = 0
    SUSPENDED = 1
    CLOSED = 2


class Worker(Base):
    __tablename__ = "workers"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    status = Column(Integer, nullable=False, default=WorkerStatus.ACTIVE)
    shard = Column(Integer, nullable=False, default=DEFAULT_SHARD, index=True)

    shifts = relationship("Shift", back_populates="worker")
