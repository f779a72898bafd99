"""
SQLAlchemy ORM Models Package.

All models are organized into domain-specific modules:
- base: Base class and TimestampMixin
- agreement: AssetFinanceAgreement, EndOption
- asset: AssetFinanceAsset
- logistics: DeliveryRecord, PickupRecord, ReturnRecord
- activity: ServiceEvent, UsageRecord
"""

from .base import Base, TimestampMixin
from .agreement import AssetFinanceAgreement, EndOption
from .asset import AssetFinanceAsset
from .logistics import DeliveryRecord, PickupRecord, ReturnRecord
from .activity import ServiceEvent, UsageRecord

__all__ = [
    "Base",
    "TimestampMixin",
    "AssetFinanceAgreement",
    "EndOption",
    "AssetFinanceAsset",
    "DeliveryRecord",
    "PickupRecord",
    "ReturnRecord",
    "ServiceEvent",
    "UsageRecord",
]
