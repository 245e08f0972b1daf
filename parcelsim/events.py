"""Simulation events and the priority keys that order them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

_TIME_WEIGHT = 10_000_000


class EventKind(enum.Enum):
    """The kinds of event the simulation processes."""

    PARCEL_ARRIVAL = enum.auto()
    PARCEL_TRANSPORT = enum.auto()


@dataclass
class Event(ABC):
    """An event that happens at a given simulation time."""

    time: float

    kind: ClassVar[EventKind]

    @abstractmethod
    def priority_key(self) -> int:
        """Return the ordering key; smaller keys are processed first."""


@dataclass
class ArrivalEvent(Event):
    """A parcel arriving at a warehouse."""

    parcel_id: int
    warehouse_id: int

    kind: ClassVar[EventKind] = EventKind.PARCEL_ARRIVAL

    def priority_key(self) -> int:
        # time | parcel id | tie-break digit 1
        return int(self.time) * _TIME_WEIGHT + self.parcel_id * 10 + 1


@dataclass
class TransportEvent(Event):
    """A scheduled transport run from one warehouse to another."""

    origin: int
    destination: int

    kind: ClassVar[EventKind] = EventKind.PARCEL_TRANSPORT

    def priority_key(self) -> int:
        # time | origin | destination | tie-break digit 2
        return (
            int(self.time) * _TIME_WEIGHT
            + self.origin * 10_000
            + self.destination * 10
            + 2
        )