"""
Centralized constants for the backend application.
Avoids magic strings for statuses and repeated limits.

Usage:
    from shared.config.constants import FinanceType, AgreementStatus, Limits

    if agreement.finance_type == FinanceType.LEASE:
        ...
"""

from typing import Final


# =============================================================================
# Agreement Constants
# =============================================================================


class FinanceType:
    """Finance type of an agreement - matches schemas Literal types."""

    LEASE: Final[str] = "LEASE"
    RENT: Final[str] = "RENT"

    ALL: Final[list[str]] = [LEASE, RENT]


class AgreementStatus:
    """Agreement status constants."""

    DRAFT: Final[str] = "DRAFT"
    PENDING: Final[str] = "PENDING"
    ACTIVE: Final[str] = "ACTIVE"
    SUSPENDED: Final[str] = "SUSPENDED"
    TERMINATED: Final[str] = "TERMINATED"
    CLOSED: Final[str] = "CLOSED"

    ALL: Final[list[str]] = [DRAFT, PENDING, ACTIVE, SUSPENDED, TERMINATED, CLOSED]


class EndOptionType:
    """What may happen to the assets when an agreement ends."""

    PURCHASE: Final[str] = "PURCHASE"
    RETURN: Final[str] = "RETURN"
    RENEW: Final[str] = "RENEW"

    ALL: Final[list[str]] = [PURCHASE, RETURN, RENEW]


# =============================================================================
# Asset Logistics Constants
# =============================================================================


class DeliveryStatus:
    """Delivery record status constants."""

    SCHEDULED: Final[str] = "SCHEDULED"
    IN_TRANSIT: Final[str] = "IN_TRANSIT"
    DELIVERED: Final[str] = "DELIVERED"
    FAILED: Final[str] = "FAILED"
    CANCELLED: Final[str] = "CANCELLED"

    ALL: Final[list[str]] = [SCHEDULED, IN_TRANSIT, DELIVERED, FAILED, CANCELLED]


class PickupStatus:
    """Pickup record status constants."""

    SCHEDULED: Final[str] = "SCHEDULED"
    IN_TRANSIT: Final[str] = "IN_TRANSIT"
    COMPLETED: Final[str] = "COMPLETED"
    FAILED: Final[str] = "FAILED"
    CANCELLED: Final[str] = "CANCELLED"

    ALL: Final[list[str]] = [SCHEDULED, IN_TRANSIT, COMPLETED, FAILED, CANCELLED]


class ServiceEventType:
    """Service event type constants."""

    MAINTENANCE: Final[str] = "MAINTENANCE"
    DAMAGE: Final[str] = "DAMAGE"
    REPAIR: Final[str] = "REPAIR"
    INSPECTION: Final[str] = "INSPECTION"

    ALL: Final[list[str]] = [MAINTENANCE, DAMAGE, REPAIR, INSPECTION]


# =============================================================================
# Limits
# =============================================================================


class Limits:
    """Field lengths and pagination limits."""

    DEFAULT_PAGE_SIZE: Final[int] = 10
    MAX_PAGE_SIZE: Final[int] = 200
    # SQL OFFSET is a signed 64-bit integer
    MAX_PAGE_NUMBER: Final[int] = (2**63 - 1) // MAX_PAGE_SIZE

    NOTE_LENGTH: Final[int] = 1000
    LONG_TEXT_LENGTH: Final[int] = 2000
    ADDRESS_LENGTH: Final[int] = 500
    URL_LENGTH: Final[int] = 500
    NAME_LENGTH: Final[int] = 200
    REGION_LENGTH: Final[int] = 100
    PHONE_LENGTH: Final[int] = 50
    POSTAL_CODE_LENGTH: Final[int] = 20

    MONEY_PRECISION: Final[int] = 18
    MONEY_SCALE: Final[int] = 2


# Phone numbers: optional leading +, digits, spaces, dashes and parentheses
PHONE_PATTERN: Final[str] = r"^[+]?[0-9\s\-()]*$"
