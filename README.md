# parcelsim

A discrete-event simulation of parcels moving through a network of
warehouses. Each parcel follows the route with the fewest hops from its
origin to its destination. At every warehouse, parcels wait in a stack for
their next hop. Periodic transports along each link unstack the section and
load the oldest parcels, up to the vehicle's capacity. The rest are put back.

## Installation

```
pip install .
```

## Running a scenario

```
parcelsim scenario.txt
```

The command takes exactly one argument, the scenario file. It writes one log
line per event to standard output, with no newline after the last line. If
the file cannot be read or parsed, it prints an error to standard error and
exits with status 1.

For the example scenario below, the output is:

```
0000001 pacote 000 armazenado em 000 na secao 001
0000012 pacote 000 removido de 000 na secao 001
0000012 pacote 000 em transito de 000 para 001
0000032 pacote 000 entregue em 001
```

Each line starts with the time, padded to seven digits. Then comes the
parcel's display id (its id modulo 100). The warehouse and section ids
follow. Ids are padded to three digits. The log messages are:

- `armazenado em ... na secao ...` — stored
- `removido de ... na secao ...` — removed
- `em transito de ... para ...` — in transit
- `rearmazenado em ... na secao ...` — stored again after the vehicle was full
- `entregue em ...` — delivered

The simulation stops once every parcel is delivered or no events remain.

## Input format

The input is a list of integers and words separated by whitespace:

1. Transport settings: capacity, latency, interval, and removal cost.
2. The number of warehouses `N`, then an `N × N` adjacency matrix of `0`/`1` values.
3. The number of parcels, at least one, then for each parcel:
   `<time> pac <id> org <origin> dst <destination>`

Parcel ids in the file start at 1. Internally they are stored one lower. The
first transports leave when the first listed parcel is posted plus one
interval. Transports run in both directions of every link.

Example:

```
2 20 10 1
2
0 1
1 0
1
1 pac 1 org 0 dst 1
```

## Using it from Python

```python
from parcelsim.simulation import Simulation, load_scenario

scenario = load_scenario("scenario.txt")
for line in Simulation(scenario).run():
    print(line)
```

- `parcelsim.simulation.parse_scenario(text)` reads the same format from a
  string. It returns a `Scenario`, which holds `transport`, `adjacency` and
  `parcels`. Malformed input raises `ValueError`.
- `parcelsim.simulation.shortest_route(adjacency, origin, destination)`
  computes a breadth-first route over an adjacency matrix.
- `Simulation.all_delivered()` tells whether every parcel has arrived.
- `parcelsim.scheduler.EventScheduler` is the min-priority event queue. It
  orders `ArrivalEvent` and `TransportEvent` objects from
  `parcelsim.events` by their `priority_key()`.
- `parcelsim.warehouse.Warehouse` holds one stack per next hop.
- `parcelsim.parcel.Parcel` tracks a parcel's route and `ParcelState`.
- `parcelsim.transport.TransportConfig` holds the transport settings.

## What it does not do

The package produces only the event log. It does not compute summary
statistics. The `time_stored` and `time_in_transit` fields on `Parcel` stay
at zero.

## Tests

```
pip install .[test]
pytest
```