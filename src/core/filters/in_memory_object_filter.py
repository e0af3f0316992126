"""
Object filtering service for list operations.

Applies filtering, sorting and pagination strategies to object summaries
already fetched from storage. This service does not perform data access.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.filters.name_contains_filter import NameContainsFilter
from core.filters.offset_pagination import OffsetPagination
from core.models.errors import FilterError
from core.utils.constants import ALLOWED_SORT_FIELDS, ALLOWED_SORT_ORDERS

ObjectItem = dict[str, Any]
logger = Logger(UTC=True)


class InMemoryObjectFilter:
    """
    Service responsible for filtering, sorting and paginating object listings.

    Prefix filtering happens in storage; everything else here.
    """

    def __init__(self) -> None:
        self._name_filter: NameContainsFilter = NameContainsFilter()
        self._pagination: OffsetPagination = OffsetPagination()

    def filter_by_name_contains(
        self,
        items: list[ObjectItem],
        *,
        name_contains: str | None,
    ) -> list[ObjectItem]:
        if not name_contains:
            return items

        return self._name_filter.apply(items, name_contains)

    def sort(
        self,
        items: list[ObjectItem],
        *,
        sort_by: str,
        sort_order: str,
    ) -> list[ObjectItem]:
        """Sort items by name or last modification time.

        Raises:
            FilterError: If the sort field or order is not supported
        """
        if sort_by not in ALLOWED_SORT_FIELDS or sort_order not in ALLOWED_SORT_ORDERS:
            raise FilterError(
                message="Invalid sort configuration",
                details={"sort_by": sort_by, "sort_order": sort_order},
            )

        return sorted(
            items,
            key=lambda item: (item.get(sort_by) or "", item.get("path") or ""),
            reverse=sort_order == "desc",
        )

    def paginate(
        self,
        items: list[ObjectItem],
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[ObjectItem], int, bool]:
        """
        Apply offset-based pagination to a list of items.

        Returns:
            A tuple of (paginated_items, total_count, has_more)

        Raises:
            FilterError: If pagination parameters are invalid
        """
        is_valid, error_message = self._pagination.validate(limit, offset)
        if not is_valid:
            logger.error(
                "Invalid pagination parameters",
                extra={"limit": limit, "offset": offset, "error": error_message},
            )
            raise FilterError(
                message=error_message,
                details={"limit": limit, "offset": offset},
            )

        return self._pagination.paginate(items, offset, limit)
