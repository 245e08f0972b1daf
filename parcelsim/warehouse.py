"""Warehouses that hold parcels in per-destination stacks."""

from __future__ import annotations

from .parcel import Parcel, ParcelState


class Warehouse:
    """A storage facility with one LIFO section per possible next warehouse."""

    def __init__(self, id: int, total_warehouses: int) -> None:
        self.id = id
        self._sections: list[list[Parcel]] = [[] for _ in range(total_warehouses)]

    def __repr__(self) -> str:
        return f"Warehouse(id={self.id}, sections={len(self._sections)})"

    def store(self, parcel: Parcel) -> None:
        """Push a parcel onto the section for its next stop and mark it stored.

        A parcel whose route is finished, or whose next stop has no section
        here, is left untouched.
        """
        next_stop = parcel.next_stop()
        if next_stop is None or not 0 <= next_stop < len(self._sections):
            return
        self._sections[next_stop].append(parcel)
        parcel.state = ParcelState.STORED

    def section(self, destination: int) -> list[Parcel]:
        """Return the stack of parcels bound for ``destination``; the top is the last item."""
        if 0 <= destination < len(self._sections):
            return self._sections[destination]
        raise IndexError(f"invalid destination warehouse id: {destination}")