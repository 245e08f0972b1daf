"""Global transport settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TransportConfig:
    """Vehicle capacity, route latency, departure interval and per-parcel removal cost."""

    capacity: int = 0
    latency: int = 0
    interval: int = 0
    removal_cost: int = 0