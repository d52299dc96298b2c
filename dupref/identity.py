"""Reference identity normalization and case-insensitive counting.

A reference is identified by its assembly name: the part of the ``Include``
value before the first comma, compared case-insensitively.  Everything after
the comma (``Version=``, ``Culture=``, ``PublicKeyToken=`` ...) is metadata.

    >>> normalize_identity("Foo.Bar, Version=1.0.0.0, Culture=neutral")
    'foo.bar'
"""

from __future__ import annotations

from typing import Iterator


def reference_name(raw_identity: str) -> str:
    """Return the assembly name of *raw_identity*, keeping its original casing."""
    name, _, _ = raw_identity.partition(",")
    return name.strip()


def normalize_identity(raw_identity: str) -> str:
    """Return the identity two references are compared by."""
    return reference_name(raw_identity).casefold()


class CaseInsensitiveCounter:
    """Ordered occurrence counter keyed by :func:`normalize_identity`.

    The first reference name seen for an identity is the one reported back by
    iteration, so ``Foo`` followed by ``foo, Version=1.0`` counts as two
    occurrences of ``Foo``.
    """

    def __init__(self) -> None:
        # normalized identity -> [first-seen reference name, count]
        self._entries: dict[str, list] = {}

    def add(self, raw_identity: str) -> int:
        """Record one occurrence of *raw_identity* and return its new count."""
        identity = normalize_identity(raw_identity)
        entry = self._entries.get(identity)
        if entry is None:
            self._entries[identity] = [reference_name(raw_identity), 1]
            return 1
        entry[1] += 1
        return entry[1]

    def __getitem__(self, key: str) -> int:
        return self._entries[normalize_identity(key)][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_identity(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        for spelling, _ in self._entries.values():
            yield spelling

    def items(self) -> list[tuple[str, int]]:
        return [(spelling, count) for spelling, count in self._entries.values()]

    def duplicates(self) -> list[str]:
        """Keys seen more than once, in first-occurrence order."""
        return [spelling for spelling, count in self._entries.values() if count > 1]

    def as_dict(self) -> dict[str, int]:
        return dict(self.items())
