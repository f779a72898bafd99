"""
Asset activity schemas: service events and usage records.
"""

from datetime import date
from uuid import UUID

from pydantic import Field

from shared.config.constants import Limits
from .common import AuditedInput, AuditedOutput, Money, ServiceEventType, TransferModel


# =============================================================================
# Service Event
# =============================================================================


class ServiceEventFields(TransferModel):
    """Mutable fields of a maintenance, damage, repair or inspection event."""

    event_type: ServiceEventType
    event_date: date
    description: str | None = Field(default=None, max_length=Limits.LONG_TEXT_LENGTH)
    service_provider: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    cost: Money | None = None
    note: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)


class ServiceEventInput(ServiceEventFields, AuditedInput):
    """Create/replace body. Identifier and asset link are taken from the URL."""

    service_event_id: UUID | None = None
    asset_finance_asset_id: UUID | None = None


class ServiceEventOutput(ServiceEventFields, AuditedOutput):
    """Service event as returned by the API."""

    service_event_id: UUID
    asset_finance_asset_id: UUID


# =============================================================================
# Usage Record
# =============================================================================


class UsageRecordFields(TransferModel):
    """Mutable fields of a usage reading."""

    usage_date: date
    mileage: int | None = Field(default=None, ge=0)
    usage_detail: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)


class UsageRecordInput(UsageRecordFields, AuditedInput):
    """Create/replace body. Identifier and asset link are taken from the URL."""

    usage_record_id: UUID | None = None
    asset_finance_asset_id: UUID | None = None


class UsageRecordOutput(UsageRecordFields, AuditedOutput):
    """Usage record as returned by the API."""

    usage_record_id: UUID
    asset_finance_asset_id: UUID
