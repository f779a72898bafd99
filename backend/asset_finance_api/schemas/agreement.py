"""
Agreement schemas: AssetFinanceAgreement and EndOption transfer models.
"""

from datetime import date
from uuid import UUID

from pydantic import Field, model_validator

from shared.config.constants import Limits
from .common import (
    AgreementStatus,
    AuditedInput,
    AuditedOutput,
    EndOptionType,
    FinanceType,
    Money,
    TransferModel,
)


# =============================================================================
# Agreement
# =============================================================================


class AgreementFields(TransferModel):
    """Mutable fields of an agreement."""

    contract_id: UUID | None = None
    customer_id: UUID | None = None
    loan_servicing_case_id: UUID | None = None
    finance_type: FinanceType
    agreement_status: AgreementStatus
    start_date: date | None = None
    end_date: date | None = None
    total_value: Money | None = None
    payment_frequency: str | None = Field(default=None, max_length=50)
    services_included: bool | None = None
    deposit_amount: Money | None = None
    early_termination_fee: Money | None = None
    residual_value: Money | None = None
    purchase_option_available: bool | None = None
    purchase_option_price: Money | None = None
    remarks: str | None = Field(default=None, max_length=Limits.LONG_TEXT_LENGTH)


class AgreementInput(AgreementFields, AuditedInput):
    """Create/replace body. The identifier is ignored when sent."""

    asset_finance_agreement_id: UUID | None = None

    @model_validator(mode="after")
    def _check_date_range(self) -> "AgreementInput":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class AgreementOutput(AgreementFields, AuditedOutput):
    """Agreement as returned by the API."""

    asset_finance_agreement_id: UUID


# =============================================================================
# End Option
# =============================================================================


class EndOptionFields(TransferModel):
    """Mutable fields of an end option."""

    option_type: EndOptionType
    option_exercise_date: date | None = None
    purchase_price: Money | None = None
    renewal_term_months: int | None = Field(default=None, ge=0)
    is_exercised: bool | None = None
    note: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)


class EndOptionInput(EndOptionFields, AuditedInput):
    """Create/replace body. Identifier and agreement link are taken from the URL."""

    end_option_id: UUID | None = None
    asset_finance_agreement_id: UUID | None = None


class EndOptionOutput(EndOptionFields, AuditedOutput):
    """End option as returned by the API."""

    end_option_id: UUID
    asset_finance_agreement_id: UUID
