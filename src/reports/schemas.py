# src/reports/schemas.py
from pydantic import BaseModel


class WorkplaceActivity(BaseModel):
    name: str
    shifts: int
