"""Discrete-event simulation of parcels moving between warehouses."""

from __future__ import annotations

import math
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .events import ArrivalEvent, EventKind, TransportEvent
from .parcel import Parcel, ParcelState
from .scheduler import EventScheduler
from .transport import TransportConfig
from .warehouse import Warehouse


@dataclass
class Scenario:
    """Everything needed to start a simulation."""

    transport: TransportConfig
    adjacency: list[list[bool]]
    parcels: list[Parcel] = field(default_factory=list)

    @property
    def warehouse_count(self) -> int:
        return len(self.adjacency)


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input while reading {what}") from None


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = _next_token(tokens, what)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def _next_bool(tokens: Iterator[str], what: str) -> bool:
    token = _next_token(tokens, what)
    if token not in ("0", "1"):
        raise ValueError(f"expected 0 or 1 for {what}, got {token!r}")
    return token == "1"


def parse_scenario(text: str) -> Scenario:
    """Parse a scenario from its whitespace-separated text form."""
    tokens = iter(text.split())

    transport = TransportConfig(
        capacity=_next_int(tokens, "capacity"),
        latency=_next_int(tokens, "latency"),
        interval=_next_int(tokens, "interval"),
        removal_cost=_next_int(tokens, "removal cost"),
    )

    count = _next_int(tokens, "warehouse count")
    if count < 0:
        raise ValueError(f"negative warehouse count: {count}")
    adjacency = [
        [_next_bool(tokens, f"adjacency[{i}][{j}]") for j in range(count)]
        for i in range(count)
    ]

    parcel_count = _next_int(tokens, "parcel count")
    if parcel_count <= 0:
        raise ValueError("scenario has no parcels")

    parcels = []
    for n in range(parcel_count):
        what = f"parcel {n}"
        posted_at = _next_int(tokens, what)
        _next_token(tokens, what)
        parcel_id = _next_int(tokens, what) - 1
        _next_token(tokens, what)
        origin = _next_int(tokens, what)
        _next_token(tokens, what)
        destination = _next_int(tokens, what)
        parcels.append(Parcel(parcel_id, posted_at, origin, destination))

    return Scenario(transport, adjacency, parcels)


def load_scenario(path: str | Path) -> Scenario:
    """Read and parse a scenario file."""
    return parse_scenario(Path(path).read_text())


def shortest_route(
    adjacency: Sequence[Sequence[bool]], origin: int, destination: int
) -> list[int]:
    """Return the fewest-hop route from origin to destination by breadth-first search.

    If the destination cannot be reached the route holds only the destination.
    """
    count = len(adjacency)
    predecessor: list[int | None] = [None] * count
    visited = [False] * count
    visited[origin] = True
    queue = deque([origin])

    while queue:
        current = queue.popleft()
        if current == destination:
            break
        for neighbour, linked in enumerate(adjacency[current]):
            if linked and not visited[neighbour]:
                visited[neighbour] = True
                predecessor[neighbour] = current
                queue.append(neighbour)

    route = []
    node: int | None = destination
    while node is not None:
        route.append(node)
        node = predecessor[node]
    route.reverse()
    return route


def _pad(value: int, width: int) -> str:
    return str(value).rjust(width, "0")


def _round(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


class Simulation:
    """Runs a scenario and produces its event log."""

    def __init__(self, scenario: Scenario) -> None:
        if not scenario.parcels:
            raise ValueError("scenario has no parcels")
        self.time = 0.0
        self.transport = scenario.transport
        self.adjacency = [list(row) for row in scenario.adjacency]
        count = len(self.adjacency)
        self.warehouses = [Warehouse(i, count) for i in range(count)]
        self.parcels = [
            Parcel(p.id, p.posted_at, p.origin, p.destination) for p in scenario.parcels
        ]
        self._by_id: dict[int, Parcel] = {}
        for parcel in self.parcels:
            self._by_id.setdefault(parcel.id, parcel)
        self._scheduler = EventScheduler()
        self._start_time = self.parcels[0].posted_at
        self._log: list[str] = []
        self._schedule_initial_events()

    def _schedule_initial_events(self) -> None:
        for parcel in self.parcels:
            parcel.set_route(shortest_route(self.adjacency, parcel.origin, parcel.destination))
            self._scheduler.push(ArrivalEvent(parcel.posted_at, parcel.id, parcel.origin))

        first_departure = self._start_time + self.transport.interval
        count = len(self.adjacency)
        for i in range(count):
            for j in range(i + 1, count):
                if self.adjacency[i][j]:
                    self._scheduler.push(TransportEvent(first_departure, i, j))
                    self._scheduler.push(TransportEvent(first_departure, j, i))

    def all_delivered(self) -> bool:
        """Tell whether every parcel has reached its destination."""
        return all(p.state is ParcelState.DELIVERED for p in self.parcels)

    def run(self) -> list[str]:
        """Process events until none remain or every parcel is delivered; return the log."""
        while self._scheduler:
            if self.all_delivered():
                break
            event = self._scheduler.pop()
            self.time = event.time
            if event.kind is EventKind.PARCEL_ARRIVAL:
                self._handle_arrival(event)
            elif event.kind is EventKind.PARCEL_TRANSPORT:
                self._handle_transport(event)
        return list(self._log)

    def _handle_arrival(self, event: ArrivalEvent) -> None:
        parcel = self._by_id.get(event.parcel_id)
        if parcel is None:
            return

        if parcel.next_stop() == event.warehouse_id:
            parcel.advance()

        stamp = f"{_pad(int(self.time), 7)} pacote {_pad(parcel.display_id, 3)}"
        if event.warehouse_id == parcel.destination:
            parcel.state = ParcelState.DELIVERED
            self._log.append(f"{stamp} entregue em {_pad(event.warehouse_id, 3)}")
        else:
            self.warehouses[event.warehouse_id].store(parcel)
            next_stop = parcel.next_stop()
            section = -1 if next_stop is None else next_stop
            self._log.append(
                f"{stamp} armazenado em {_pad(event.warehouse_id, 3)} "
                f"na secao {_pad(section, 3)}"
            )

    def _reschedule(self, event: TransportEvent) -> None:
        if not self.all_delivered():
            self._scheduler.push(
                TransportEvent(
                    self.time + self.transport.interval, event.origin, event.destination
                )
            )

    def _handle_transport(self, event: TransportEvent) -> None:
        if self.all_delivered():
            return

        self.time = event.time
        origin = _pad(event.origin, 3)
        destination = _pad(event.destination, 3)
        section = self.warehouses[event.origin].section(event.destination)

        if not section:
            self._reschedule(event)
            return

        # Unstack from the top, paying the removal cost for each parcel.
        unstacked = section[::-1]
        section.clear()

        operation_time = event.time
        for parcel in unstacked:
            operation_time += self.transport.removal_cost
            self._log.append(
                f"{_pad(_round(operation_time), 7)} pacote {_pad(parcel.display_id, 3)} "
                f"removido de {origin} na secao {destination}"
            )

        finished = _round(operation_time)
        oldest_first = unstacked[::-1]
        capacity = max(self.transport.capacity, 0)
        loaded = oldest_first[:capacity]
        left_behind = oldest_first[capacity:]

        for parcel in loaded:
            parcel.state = ParcelState.REMOVED_FOR_TRANSPORT
            self._log.append(
                f"{_pad(finished, 7)} pacote {_pad(parcel.display_id, 3)} "
                f"em transito de {origin} para {destination}"
            )
            self._scheduler.push(
                ArrivalEvent(finished + self.transport.latency, parcel.id, event.destination)
            )

        section.extend(left_behind)
        for parcel in left_behind:
            self._log.append(
                f"{_pad(finished, 7)} pacote {_pad(parcel.display_id, 3)} "
                f"rearmazenado em {origin} na secao {destination}"
            )

        self._reschedule(event)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation described by the scenario file given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: parcelsim <input_file>", file=sys.stderr)
        return 1

    try:
        simulation = Simulation(load_scenario(args[0]))
        lines = simulation.run()
    except (OSError, ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write("\n".join(lines))
    return 0