"""
Asset Model: the financed item attached to an agreement.
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .agreement import MONEY
from .base import Base, TimestampMixin


class AssetFinanceAsset(TimestampMixin, Base):
    """
    Asset financed under an agreement.
    The parent agreement link is set on creation and never reassigned.
    """

    __tablename__ = "asset_finance_asset"

    asset_finance_asset_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    asset_finance_agreement_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("asset_finance_agreement.asset_finance_agreement_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    asset_category: Mapped[Optional[str]] = mapped_column(String(100))
    asset_description: Mapped[str] = mapped_column(String(500), nullable=False)
    manufacturer: Mapped[Optional[str]] = mapped_column(String(200))
    asset_model: Mapped[Optional[str]] = mapped_column(String(200))
    serial_number: Mapped[Optional[str]] = mapped_column(String(100), index=True)
    asset_value: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    note: Mapped[Optional[str]] = mapped_column(Text)
