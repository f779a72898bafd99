"""
Pagination arithmetic for list endpoints.

Usage:
    pagination = Pagination(page_number=2, page_size=20)
    repo.find_by_spec(spec, limit=pagination.limit, offset=pagination.offset)
    pagination.total_pages(total)
"""

from dataclasses import dataclass

from shared.config.constants import Limits


@dataclass
class Pagination:
    """
    Page selection with validation.

    Attributes:
        page_number: 0-based page index
        page_size: Items per page (1 to max_page_size)
        max_page_size: Maximum allowed page size (default 200)
    """

    page_number: int
    page_size: int
    max_page_size: int = Limits.MAX_PAGE_SIZE

    def __post_init__(self):
        """Validate and normalize values."""
        self.page_size = min(max(1, self.page_size), self.max_page_size)
        self.page_number = max(0, self.page_number)

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def offset(self) -> int:
        """Number of items to skip."""
        return self.page_number * self.page_size

    def total_pages(self, total: int) -> int:
        """Number of pages needed for total items (0 when empty)."""
        return (total + self.page_size - 1) // self.page_size
