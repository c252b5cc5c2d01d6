from __future__ import annotations

from collections.abc import Iterable

from hostel_api.schemas.hostel import Hostel


class HostelCache:
    """Process-wide snapshot of every hostel record.

    Starts empty and is filled by a single reference swap in ``replace``, so
    readers see either the previous snapshot or the complete new one.
    """

    def __init__(self) -> None:
        self._hostels: tuple[Hostel, ...] = ()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._hostels)

    def replace(self, hostels: Iterable[Hostel]) -> None:
        snapshot = tuple(hostels)
        self._hostels = snapshot
        self._loaded = True

    def find_by_name(self, name: str) -> Hostel | None:
        for hostel in self._hostels:
            if hostel.name == name:
                return hostel
        return None

    def first(self, limit: int) -> list[Hostel]:
        if limit < 1:
            return []
        return list(self._hostels[:limit])
