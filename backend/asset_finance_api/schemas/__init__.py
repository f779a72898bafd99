"""
Pydantic transfer models.

Each resource has three classes:
- <Name>Fields: mutable fields shared by input and output
- <Name>Input: create/replace body (identifiers and timestamps accepted but ignored)
- <Name>Output: representation returned to clients
"""

from .common import (
    FilterRequest,
    PageRequest,
    PaginationResponse,
    RangeFilter,
    TransferModel,
)
from .agreement import AgreementInput, AgreementOutput, EndOptionInput, EndOptionOutput
from .asset import AssetInput, AssetOutput
from .logistics import (
    DeliveryRecordInput,
    DeliveryRecordOutput,
    PickupRecordInput,
    PickupRecordOutput,
    ReturnRecordInput,
    ReturnRecordOutput,
)
from .activity import (
    ServiceEventInput,
    ServiceEventOutput,
    UsageRecordInput,
    UsageRecordOutput,
)

__all__ = [
    "FilterRequest",
    "PageRequest",
    "PaginationResponse",
    "RangeFilter",
    "TransferModel",
    "AgreementInput",
    "AgreementOutput",
    "EndOptionInput",
    "EndOptionOutput",
    "AssetInput",
    "AssetOutput",
    "DeliveryRecordInput",
    "DeliveryRecordOutput",
    "PickupRecordInput",
    "PickupRecordOutput",
    "ReturnRecordInput",
    "ReturnRecordOutput",
    "ServiceEventInput",
    "ServiceEventOutput",
    "UsageRecordInput",
    "UsageRecordOutput",
]
