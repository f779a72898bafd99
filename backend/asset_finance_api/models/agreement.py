"""
Agreement Models: AssetFinanceAgreement, EndOption.
"""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, Date, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits
from .base import Base, TimestampMixin


MONEY = Numeric(Limits.MONEY_PRECISION, Limits.MONEY_SCALE)


class AssetFinanceAgreement(TimestampMixin, Base):
    """
    Leasing or renting contract. Root of the resource hierarchy.
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "asset_finance_agreement"

    asset_finance_agreement_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    # References to records owned by other services
    contract_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, index=True)
    customer_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, index=True)
    loan_servicing_case_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid)

    finance_type: Mapped[str] = mapped_column(String(20), nullable=False)
    agreement_status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    start_date: Mapped[Optional[date]] = mapped_column(Date)
    end_date: Mapped[Optional[date]] = mapped_column(Date)

    total_value: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    payment_frequency: Mapped[Optional[str]] = mapped_column(String(50))
    services_included: Mapped[Optional[bool]] = mapped_column(Boolean)
    deposit_amount: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    early_termination_fee: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    residual_value: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    purchase_option_available: Mapped[Optional[bool]] = mapped_column(Boolean)
    purchase_option_price: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    remarks: Mapped[Optional[str]] = mapped_column(Text)


class EndOption(TimestampMixin, Base):
    """
    Option available at the end of an agreement (purchase, return, renew).
    Inherits: created_at, updated_at from TimestampMixin.
    """

    __tablename__ = "end_option"

    end_option_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    asset_finance_agreement_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("asset_finance_agreement.asset_finance_agreement_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    option_type: Mapped[str] = mapped_column(String(20), nullable=False)
    option_exercise_date: Mapped[Optional[date]] = mapped_column(Date)
    purchase_price: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    renewal_term_months: Mapped[Optional[int]] = mapped_column(Integer)
    is_exercised: Mapped[Optional[bool]] = mapped_column(Boolean)
    note: Mapped[Optional[str]] = mapped_column(Text)
