"""Ordered, deduplicated collection of relevant alterations."""

from typing import Callable, Iterable, Iterator

from oncomatch.models.alteration import Alteration


class RelevantAlterations:
    """Alterations in priority order, without duplicates.

    Iteration order is part of the contract: the exact match comes first,
    then positional and range matches, then derived buckets. Adding an
    alteration that is already present keeps its original position.
    """

    def __init__(self, alterations: Iterable[Alteration] = ()):
        self._items: list[Alteration] = []
        self._members: set[Alteration] = set()
        self.update(alterations)

    def add(self, alteration: Alteration) -> bool:
        """Append an alteration. Returns False if it was already present."""
        if alteration in self._members:
            return False
        self._items.append(alteration)
        self._members.add(alteration)
        return True

    def update(self, alterations: Iterable[Alteration]) -> None:
        for alteration in alterations:
            self.add(alteration)

    def filter(self, predicate: Callable[[Alteration], bool]) -> "RelevantAlterations":
        """Build a new collection keeping members that satisfy predicate, in order."""
        return RelevantAlterations(alt for alt in self._items if predicate(alt))

    def without(self, alterations: Iterable[Alteration]) -> "RelevantAlterations":
        removed = set(alterations)
        return self.filter(lambda alt: alt not in removed)

    def names(self) -> list[str]:
        return [alt.alteration for alt in self._items]

    def first(self) -> Alteration | None:
        return self._items[0] if self._items else None

    def __contains__(self, alteration: object) -> bool:
        return alteration in self._members

    def __iter__(self) -> Iterator[Alteration]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RelevantAlterations):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"RelevantAlterations({self.names()!r})"
