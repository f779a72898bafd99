"""
Asset logistics schemas: delivery, pickup and return records.
"""

from datetime import date
from uuid import UUID

from pydantic import Field, field_validator

from shared.config.constants import Limits
from .common import (
    AuditedInput,
    AuditedOutput,
    ContactEmail,
    DeliveryStatus,
    Money,
    PhoneNumber,
    PhotoUrl,
    PickupStatus,
    TransferModel,
    ensure_not_future,
)


# =============================================================================
# Delivery Record
# =============================================================================


class DeliveryRecordFields(TransferModel):
    """Mutable fields of a delivery record."""

    delivery_status: DeliveryStatus
    scheduled_delivery_date: date | None = None
    actual_delivery_date: date | None = None

    delivery_address: str = Field(min_length=1, max_length=Limits.ADDRESS_LENGTH)
    delivery_city: str | None = Field(default=None, max_length=Limits.REGION_LENGTH)
    delivery_state: str | None = Field(default=None, max_length=Limits.REGION_LENGTH)
    delivery_postal_code: str | None = Field(default=None, max_length=Limits.POSTAL_CODE_LENGTH)
    delivery_country: str | None = Field(default=None, max_length=Limits.REGION_LENGTH)

    carrier_name: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    tracking_number: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    recipient_name: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    recipient_phone: PhoneNumber | None = None
    recipient_email: ContactEmail | None = None

    signature_received: bool | None = None
    delivery_condition_notes: str | None = Field(default=None, max_length=Limits.LONG_TEXT_LENGTH)
    delivery_photo_urls: list[PhotoUrl] | None = None
    failed_delivery_reason: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)
    delivery_attempts: int | None = Field(default=None, ge=0)
    note: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)


class DeliveryRecordInput(DeliveryRecordFields, AuditedInput):
    """Create/replace body. Identifier and asset link are taken from the URL."""

    delivery_record_id: UUID | None = None
    asset_finance_asset_id: UUID | None = None


class DeliveryRecordOutput(DeliveryRecordFields, AuditedOutput):
    """Delivery record as returned by the API."""

    delivery_record_id: UUID
    asset_finance_asset_id: UUID


# =============================================================================
# Pickup Record
# =============================================================================


class PickupRecordFields(TransferModel):
    """Mutable fields of a pickup record."""

    pickup_status: PickupStatus
    scheduled_pickup_date: date | None = None
    actual_pickup_date: date | None = None

    pickup_address: str = Field(min_length=1, max_length=Limits.ADDRESS_LENGTH)
    pickup_city: str | None = Field(default=None, max_length=Limits.REGION_LENGTH)
    pickup_state: str | None = Field(default=None, max_length=Limits.REGION_LENGTH)
    pickup_postal_code: str | None = Field(default=None, max_length=Limits.POSTAL_CODE_LENGTH)
    pickup_country: str | None = Field(default=None, max_length=Limits.REGION_LENGTH)

    carrier_name: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    tracking_number: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    collector_name: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    collector_phone: PhoneNumber | None = None
    collector_email: ContactEmail | None = None

    signature_received: bool | None = None
    pickup_condition_notes: str | None = Field(default=None, max_length=Limits.LONG_TEXT_LENGTH)
    pickup_photo_urls: list[PhotoUrl] | None = None
    failed_pickup_reason: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)
    pickup_attempts: int | None = Field(default=None, ge=0)
    note: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)


class PickupRecordInput(PickupRecordFields, AuditedInput):
    """Create/replace body. Identifier and asset link are taken from the URL."""

    pickup_record_id: UUID | None = None
    asset_finance_asset_id: UUID | None = None

    @field_validator("actual_pickup_date")
    @classmethod
    def _pickup_already_happened(cls, value: date | None) -> date | None:
        return ensure_not_future(value)


class PickupRecordOutput(PickupRecordFields, AuditedOutput):
    """Pickup record as returned by the API."""

    pickup_record_id: UUID
    asset_finance_asset_id: UUID


# =============================================================================
# Return Record
# =============================================================================


class ReturnRecordFields(TransferModel):
    """Mutable fields of a return record."""

    actual_return_date: date
    condition_report: str = Field(min_length=1, max_length=Limits.LONG_TEXT_LENGTH)
    damage_cost: Money | None = None
    is_finalized: bool | None = None
    note: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)


class ReturnRecordInput(ReturnRecordFields, AuditedInput):
    """Create/replace body. Identifier and asset link are taken from the URL."""

    return_record_id: UUID | None = None
    asset_finance_asset_id: UUID | None = None


class ReturnRecordOutput(ReturnRecordFields, AuditedOutput):
    """Return record as returned by the API."""

    return_record_id: UUID
    asset_finance_asset_id: UUID
