"""
Asset schemas.
"""

from uuid import UUID

from pydantic import Field

from shared.config.constants import Limits
from .common import AuditedInput, AuditedOutput, Money, TransferModel


class AssetFields(TransferModel):
    """Mutable fields of an asset."""

    asset_category: str | None = Field(default=None, max_length=Limits.REGION_LENGTH)
    asset_description: str = Field(min_length=1, max_length=Limits.ADDRESS_LENGTH)
    manufacturer: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    asset_model: str | None = Field(default=None, max_length=Limits.NAME_LENGTH)
    serial_number: str | None = Field(default=None, max_length=100)
    asset_value: Money | None = None
    is_active: bool = True
    note: str | None = Field(default=None, max_length=Limits.NOTE_LENGTH)


class AssetInput(AssetFields, AuditedInput):
    """Create/replace body. Identifier and agreement link are taken from the URL."""

    asset_finance_asset_id: UUID | None = None
    asset_finance_agreement_id: UUID | None = None


class AssetOutput(AssetFields, AuditedOutput):
    """Asset as returned by the API."""

    asset_finance_asset_id: UUID
    asset_finance_agreement_id: UUID
