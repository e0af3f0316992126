"""Name-based filtering for stored objects."""

from typing import Any


class NameContainsFilter:
    """Filter objects by file name using case-insensitive substring search.

    Matches any object whose final path segment contains the search term,
    so a part photo can be found without remembering its folder layout.
    """

    @staticmethod
    def apply(
        items: list[dict[str, Any]],
        search_term: str,
        field_name: str = "name",
    ) -> list[dict[str, Any]]:
        """Apply name filter to items."""
        if not search_term or not search_term.strip():
            return items

        search_lower = search_term.strip().lower()
        return [
            item for item in items if search_lower in (item.get(field_name) or "").lower()
        ]
