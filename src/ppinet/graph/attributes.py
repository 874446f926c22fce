from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

Attribute = Tuple[str, str]


class AttributeBag:
    """
    Ordered, string-keyed property list attached to a node or an edge.

    Entities carry a handful of attributes, so pairs are kept in a plain
    list and looked up by linear scan. Insertion order is preserved until
    a key is deleted; deletion swaps the last pair into the freed slot.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[Attribute] = ()) -> None:
        self._pairs: List[Attribute] = []
        self.update(pairs)

    # -------------------- Access --------------------

    def get(self, key: str) -> str:
        """
        Return the value for key, or the empty string if it is unset.
        """
        for k, v in self._pairs:
            if k == key:
                return v
        return ""

    def set(self, key: str, value: str) -> None:
        """
        Set key to value. An empty value unsets the key.
        """
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"attribute keys and values must be str, got {type(key).__name__}"
                f"={type(value).__name__}"
            )
        if not key:
            raise ValueError("attribute key must not be empty")

        for i, (k, _) in enumerate(self._pairs):
            if k != key:
                continue
            if value:
                self._pairs[i] = (key, value)
            else:
                self._pairs[i] = self._pairs[-1]
                self._pairs.pop()
            return

        if value:
            self._pairs.append((key, value))

    def update(self, pairs: Iterable[Attribute]) -> None:
        for key, value in pairs:
            self.set(key, value)

    def enumerate(self) -> List[Attribute]:
        """
        Return the stored pairs in their current order.
        """
        return list(self._pairs)

    def keys(self) -> List[str]:
        return [k for k, _ in self._pairs]

    def copy(self) -> "AttributeBag":
        bag = AttributeBag()
        bag._pairs = list(self._pairs)
        return bag

    # -------------------- Protocol --------------------

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(list(self._pairs))

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeBag):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._pairs)
        return f"AttributeBag({inner})"
