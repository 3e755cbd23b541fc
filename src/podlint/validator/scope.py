"""Per-mapping bookkeeping of which known fields were encountered."""

from typing import Iterable, List, Set, Tuple


class FieldTracker:
    """
    Tracks the fields seen in one mapping.

    Each level validator owns a fresh tracker for the mapping it walks, so
    a field seen in a nested mapping never satisfies the parent's
    requirements.
    """

    def __init__(self, required: Iterable[str] = ()):
        self.required: Tuple[str, ...] = tuple(required)
        self.visited: Set[str] = set()

    def mark_seen(self, field_name: str) -> None:
        self.visited.add(field_name)

    def missing_required(self) -> List[str]:
        """Required fields never marked seen, in declaration order."""
        return [name for name in self.required if name not in self.visited]
