from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PropDefinition:
    name: str
    type: str
    required: bool
    default_value: str | None = None


@dataclass(frozen=True)
class DiscoveredComponent:
    name: str
    path: str
    props: tuple[PropDefinition, ...] = ()
