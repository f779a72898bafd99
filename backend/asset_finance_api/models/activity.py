"""
Asset Activity Models: ServiceEvent, UsageRecord.
"""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .agreement import MONEY
from .base import Base, TimestampMixin
from .logistics import ASSET_FK


class ServiceEvent(TimestampMixin, Base):
    """
    Maintenance, damage, repair or inspection event on an asset.
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "service_event"

    service_event_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    asset_finance_asset_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey(ASSET_FK, ondelete="CASCADE"), nullable=False, index=True
    )
    event_type: Mapped[str] = mapped_column(String(20), nullable=False)
    event_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    service_provider: Mapped[Optional[str]] = mapped_column(String(200))
    cost: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    note: Mapped[Optional[str]] = mapped_column(Text)


class UsageRecord(TimestampMixin, Base):
    """
    Usage reading of an asset (for example an odometer reading).
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "usage_record"

    usage_record_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    asset_finance_asset_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey(ASSET_FK, ondelete="CASCADE"), nullable=False, index=True
    )
    usage_date: Mapped[date] = mapped_column(Date, nullable=False)
    mileage: Mapped[Optional[int]] = mapped_column(Integer)
    usage_detail: Mapped[Optional[str]] = mapped_column(Text)
