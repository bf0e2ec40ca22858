"""Reference data models consumed by the core as opaque configuration."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SlotCategory(str, Enum):
    """Kind of appointment a time slot is reserved for."""
    NORMAL = "normal"
    REPAIR = "repair"
    OVERTIME = "overtime"


class Stylist(BaseModel):
    """Entry in the stylist directory."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    title: str
    specialty: str
    initial: str = ""


class TimeSlotOption(BaseModel):
    """Single bookable time of day with its remaining seats."""
    model_config = ConfigDict(frozen=True)

    label: str
    category: SlotCategory = SlotCategory.NORMAL
    seats: int = Field(default=0, ge=0)


class CatalogOption(BaseModel):
    """Selectable code with its human label and list price."""
    model_config = ConfigDict(frozen=True)

    code: str
    label: str
    price: int = 0
    subtitle: str = ""
