"""Parcels and their progress along a route."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field


class ParcelState(enum.Enum):
    """Stages a parcel passes through during the simulation."""

    NOT_POSTED = enum.auto()
    ARRIVAL_SCHEDULED = enum.auto()
    STORED = enum.auto()
    REMOVED_FOR_TRANSPORT = enum.auto()
    DELIVERED = enum.auto()


@dataclass
class Parcel:
    """A parcel travelling from an origin warehouse to a destination warehouse."""

    id: int
    posted_at: int
    origin: int
    destination: int
    state: ParcelState = ParcelState.NOT_POSTED
    route: list[int] = field(default_factory=list)
    route_index: int = 0
    time_stored: float = 0.0
    time_in_transit: float = 0.0

    @property
    def display_id(self) -> int:
        """Short identifier used in the event log."""
        return self.id % 100

    def set_route(self, route: Iterable[int]) -> None:
        """Replace the sequence of warehouses the parcel must visit."""
        self.route = list(route)

    def next_stop(self) -> int | None:
        """Return the next warehouse on the route, or None once the route is done."""
        if self.route_index < len(self.route):
            return self.route[self.route_index]
        return None

    def advance(self) -> None:
        """Move to the next warehouse on the route, if any remain."""
        if self.route_index < len(self.route):
            self.route_index += 1