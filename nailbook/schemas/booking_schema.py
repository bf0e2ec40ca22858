"""Derived pricing and booking summary data models."""

from datetime import date as Date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Quote(BaseModel):
    """Total price (whole NT$) and total service time (minutes)."""
    model_config = ConfigDict(frozen=True)

    price: int = 0
    duration: int = 0


class LineItem(BaseModel):
    """One priced contribution to a quote."""
    model_config = ConfigDict(frozen=True)

    category: str
    code: str
    part: Optional[str] = None
    quantity: int = 1
    price: int = 0
    duration: int = 0


class SummaryLine(BaseModel):
    """Line item rendered with its catalogue label."""
    label: str
    part: Optional[str] = None
    quantity: int = 1
    price: int = 0
    duration: int = 0


class BookingSummary(BaseModel):
    """Read-back shown on the confirm step."""
    service_label: Optional[str] = None
    stylist_name: Optional[str] = None
    date: Optional[Date] = None
    time: Optional[str] = None
    lines: list[SummaryLine] = Field(default_factory=list)
    price: int = 0
    duration: int = 0


class BookingRequest(BaseModel):
    """Payload handed to the external submission collaborator."""
    main_service: Optional[str] = None
    stylist_id: str
    date: Date
    time: str
    price: int
    duration: int
    items: list[LineItem] = Field(default_factory=list)
    customer_name: str = ""
    customer_phone: str = ""
    line_id: str = ""
    notes: str = ""
