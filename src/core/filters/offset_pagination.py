"""
Offset-based pagination utilities.
"""

from typing import Any

from core.utils.constants import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    MAX_LIMIT,
    MIN_LIMIT,
)


class OffsetPagination:
    """
    Offset-based pagination helper.

    Typical usage:
    1. Validate offset and limit parameters
    2. Apply pagination to a list of items
    3. Return paginated items along with metadata
    """

    @staticmethod
    def paginate(
        items: list[dict[str, Any]],
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> tuple[list[dict[str, Any]], int, bool]:
        """
        Paginate a list of items using offset and limit.

        Returns:
            A tuple containing:
            - paginated_items: List of items for the current page
            - total_count: Total number of items before pagination
            - has_more: True if more items exist beyond this page

        Example:
            items = [1, 2, 3, 4, 5]
            offset = 0
            limit = 2

            → ([1, 2], 5, True)
        """
        total_count = len(items)
        paginated_items = items[offset : offset + limit]
        has_more = offset + limit < total_count

        return paginated_items, total_count, has_more

    @staticmethod
    def validate(limit: int, offset: int) -> tuple[bool, str]:
        """
        Validate pagination parameters.

        Validation rules:
        - limit must be within [MIN_LIMIT, MAX_LIMIT]
        - offset must be zero or positive

        Returns:
            A tuple of (is_valid, error_message)
        """
        if limit < MIN_LIMIT:
            return False, f"Limit must be at least {MIN_LIMIT}"

        if limit > MAX_LIMIT:
            return False, f"Limit must not exceed {MAX_LIMIT}"

        if offset < 0:
            return False, "Offset must be zero or a positive integer"

        return True, ""
