"""
Shared Pydantic schemas: transfer model base classes, list filters and pages.

Transfer models are snake_case in Python and camelCase on the wire.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from shared.config.constants import PHONE_PATTERN, Limits


# =============================================================================
# Common Types
# =============================================================================

FinanceType = Literal["LEASE", "RENT"]
AgreementStatus = Literal["DRAFT", "PENDING", "ACTIVE", "SUSPENDED", "TERMINATED", "CLOSED"]
EndOptionType = Literal["PURCHASE", "RETURN", "RENEW"]
DeliveryStatus = Literal["SCHEDULED", "IN_TRANSIT", "DELIVERED", "FAILED", "CANCELLED"]
PickupStatus = Literal["SCHEDULED", "IN_TRANSIT", "COMPLETED", "FAILED", "CANCELLED"]
ServiceEventType = Literal["MAINTENANCE", "DAMAGE", "REPAIR", "INSPECTION"]
SortDirection = Literal["ASC", "DESC"]

# Non-negative amount stored with two decimals
Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=Limits.MONEY_PRECISION, decimal_places=Limits.MONEY_SCALE),
]

PhoneNumber = Annotated[str, Field(max_length=Limits.PHONE_LENGTH, pattern=PHONE_PATTERN)]
PhotoUrl = Annotated[str, Field(max_length=Limits.URL_LENGTH)]


def _limit_email_length(value: str) -> str:
    if len(value) > Limits.NAME_LENGTH:
        raise ValueError(f"must be at most {Limits.NAME_LENGTH} characters")
    return value


ContactEmail = Annotated[EmailStr, AfterValidator(_limit_email_length)]

T = TypeVar("T")


DateOrTime = TypeVar("DateOrTime", date, datetime)


def ensure_not_future(value: DateOrTime | None) -> DateOrTime | None:
    """Reject timestamps later than now and dates after today. Naive values are read as UTC."""
    if value is None:
        return value
    if isinstance(value, datetime):
        now = datetime.now(timezone.utc)
        if value.tzinfo is None:
            now = now.replace(tzinfo=None)
    else:
        now = date.today()
    if value > now:
        raise ValueError("must be a date in the past or in the present")
    return value


# =============================================================================
# Transfer Model Base Classes
# =============================================================================


class TransferModel(BaseModel):
    """Base for every request/response body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AuditedInput(TransferModel):
    """
    Audit timestamps as accepted on create/update bodies.

    The values are validated and then ignored: storage assigns them.
    """

    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def _not_in_future(cls, value: datetime | None) -> datetime | None:
        return ensure_not_future(value)


class AuditedOutput(TransferModel):
    """Audit timestamps as returned to clients."""

    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# List Filter and Pagination Schemas
# =============================================================================


class RangeFilter(TransferModel):
    """Inclusive bounds for one field. Either side may be omitted."""

    from_value: Any = Field(default=None, alias="from")
    to_value: Any = Field(default=None, alias="to")


class PageRequest(TransferModel):
    """Page selection and ordering. Pages are 0-based."""

    page_number: int = Field(default=0, ge=0, le=Limits.MAX_PAGE_NUMBER)
    page_size: int | None = Field(default=None, ge=1)
    sort_by: str | None = None
    sort_direction: SortDirection = "ASC"

    @field_validator("sort_direction", mode="before")
    @classmethod
    def _upper_direction(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class FilterRequest(TransferModel):
    """
    Body accepted by list endpoints.

    Example:
        {
            "filters": {"financeType": "LEASE"},
            "rangeFilters": {"totalValue": {"from": 1000, "to": 5000}},
            "pagination": {"pageNumber": 0, "pageSize": 20, "sortBy": "startDate"}
        }
    """

    filters: dict[str, Any] = Field(default_factory=dict)
    range_filters: dict[str, RangeFilter] = Field(default_factory=dict)
    pagination: PageRequest = Field(default_factory=PageRequest)


class PaginationResponse(TransferModel, Generic[T]):
    """One page of results plus totals for the whole filtered set."""

    content: list[T]
    total_elements: int
    total_pages: int
    current_page: int
    page_size: int
