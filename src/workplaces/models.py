# src/workplaces/models.py
import enum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.pagination.constants import DEFAULT_SHARD


class WorkplaceStatus(enum.IntEnum):
    ACTIVE = 0
    SUSPENDED = 1
    CLOSED = 2


class Workplace(Base):
    __tablename__ = "workplaces"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    status = Column(Integer, nullable=False, default=WorkplaceStatus.ACTIVE)
    shard = Column(Integer, nullable=False, default=DEFAULT_SHARD, index=True)

    shifts = relationship("Shift", back_populates="workplace")
