"""Apartment model."""

from dataclasses import dataclass

from prop_ledger.models.base import UNSET, Patch


@dataclass
class Apartment:
    """A rentable unit."""

    id: str
    name: str
    address: str
    size: float  # Square meters
    rooms: int
    floor: int
    notes: str | None = None


@dataclass
class ApartmentPatch(Patch):
    name: str = UNSET
    address: str = UNSET
    size: float = UNSET
    rooms: int = UNSET
    floor: int = UNSET
    notes: str | None = UNSET
