# app/db_models.py

from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

# Signed 64-bit range of the id column
MIN_ID = -2**63
MAX_ID = 2**63 - 1
NAME_MAX_LENGTH = 100


def _utcnow() -> datetime:
  return datetime.now(timezone.utc)


class ProductRecord(SQLModel, table=True):
  """Storage row for a product. Timestamps never leave the persistence layer."""
  __tablename__ = "products"
  __table_args__ = {"extend_existing": True}

  id: Optional[int] = Field(default=None, primary_key=True)
  name: str = Field(max_length=NAME_MAX_LENGTH)
  price: float
  availability: bool = Field(default=True)
  created_at: datetime = Field(default_factory=_utcnow)
  updated_at: datetime = Field(default_factory=_utcnow, sa_column_kwargs={"onupdate": _utcnow})
