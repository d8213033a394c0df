from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.ext.asyncio import AsyncAttrs

from app.infrastructure.database.db_helper import Base
from app.infrastructure.database.types import ExactDecimal

class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime, default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=func.now(), onupdate=func.now())

class User(Base, AsyncAttrs, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    address: Mapped[str] = mapped_column(String, unique=True, nullable=False)  # EIP-55 checksum form

    display_name: Mapped[str] = mapped_column(String, nullable=False)  # Set once on insert
    balance_snapshot: Mapped[Decimal] = mapped_column(ExactDecimal(38, 18), nullable=False)  # Ether, all 18 digits
    visit_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
