"""Core data models shared by the nearby-search fan-out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True, slots=True)
class NearbyQuery:
    """One upstream search strategy issued during a nearby lookup."""

    name: str
    endpoint: str
    params: Dict[str, str] = field(default_factory=dict)
