"""
Asset Logistics Models: DeliveryRecord, PickupRecord, ReturnRecord.
"""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import JSON, Boolean, Date, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .agreement import MONEY
from .base import Base, TimestampMixin


ASSET_FK = "asset_finance_asset.asset_finance_asset_id"


class DeliveryRecord(TimestampMixin, Base):
    """
    Shipment of an asset to the customer.
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "delivery_record"

    delivery_record_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    asset_finance_asset_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey(ASSET_FK, ondelete="CASCADE"), nullable=False, index=True
    )
    delivery_status: Mapped[str] = mapped_column(String(20), nullable=False)
    scheduled_delivery_date: Mapped[Optional[date]] = mapped_column(Date)
    actual_delivery_date: Mapped[Optional[date]] = mapped_column(Date)

    # Destination
    delivery_address: Mapped[str] = mapped_column(String(500), nullable=False)
    delivery_city: Mapped[Optional[str]] = mapped_column(String(100))
    delivery_state: Mapped[Optional[str]] = mapped_column(String(100))
    delivery_postal_code: Mapped[Optional[str]] = mapped_column(String(20))
    delivery_country: Mapped[Optional[str]] = mapped_column(String(100))

    # Carrier and recipient
    carrier_name: Mapped[Optional[str]] = mapped_column(String(200))
    tracking_number: Mapped[Optional[str]] = mapped_column(String(200))
    recipient_name: Mapped[Optional[str]] = mapped_column(String(200))
    recipient_phone: Mapped[Optional[str]] = mapped_column(String(50))
    recipient_email: Mapped[Optional[str]] = mapped_column(String(200))

    # Outcome
    signature_received: Mapped[Optional[bool]] = mapped_column(Boolean)
    delivery_condition_notes: Mapped[Optional[str]] = mapped_column(Text)
    delivery_photo_urls: Mapped[Optional[list[str]]] = mapped_column(JSON)
    failed_delivery_reason: Mapped[Optional[str]] = mapped_column(Text)
    delivery_attempts: Mapped[Optional[int]] = mapped_column(Integer)
    note: Mapped[Optional[str]] = mapped_column(Text)


class PickupRecord(TimestampMixin, Base):
    """
    Collection of an asset from the customer.
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "pickup_record"

    pickup_record_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    asset_finance_asset_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey(ASSET_FK, ondelete="CASCADE"), nullable=False, index=True
    )
    pickup_status: Mapped[str] = mapped_column(String(20), nullable=False)
    scheduled_pickup_date: Mapped[Optional[date]] = mapped_column(Date)
    actual_pickup_date: Mapped[Optional[date]] = mapped_column(Date)

    # Origin
    pickup_address: Mapped[str] = mapped_column(String(500), nullable=False)
    pickup_city: Mapped[Optional[str]] = mapped_column(String(100))
    pickup_state: Mapped[Optional[str]] = mapped_column(String(100))
    pickup_postal_code: Mapped[Optional[str]] = mapped_column(String(20))
    pickup_country: Mapped[Optional[str]] = mapped_column(String(100))

    # Carrier and collector
    carrier_name: Mapped[Optional[str]] = mapped_column(String(200))
    tracking_number: Mapped[Optional[str]] = mapped_column(String(200))
    collector_name: Mapped[Optional[str]] = mapped_column(String(200))
    collector_phone: Mapped[Optional[str]] = mapped_column(String(50))
    collector_email: Mapped[Optional[str]] = mapped_column(String(200))

    # Outcome
    signature_received: Mapped[Optional[bool]] = mapped_column(Boolean)
    pickup_condition_notes: Mapped[Optional[str]] = mapped_column(Text)
    pickup_photo_urls: Mapped[Optional[list[str]]] = mapped_column(JSON)
    failed_pickup_reason: Mapped[Optional[str]] = mapped_column(Text)
    pickup_attempts: Mapped[Optional[int]] = mapped_column(Integer)
    note: Mapped[Optional[str]] = mapped_column(Text)


class ReturnRecord(TimestampMixin, Base):
    """
    Inspection of a returned asset.
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "return_record"

    return_record_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    asset_finance_asset_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey(ASSET_FK, ondelete="CASCADE"), nullable=False, index=True
    )
    actual_return_date: Mapped[date] = mapped_column(Date, nullable=False)
    condition_report: Mapped[str] = mapped_column(Text, nullable=False)
    damage_cost: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    is_finalized: Mapped[Optional[bool]] = mapped_column(Boolean)
    note: Mapped[Optional[str]] = mapped_column(Text)
