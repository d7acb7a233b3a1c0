from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


OrderingName = Literal["less", "equal", "greater"]
ListOrder = Literal["address", "insertion"]


class AddressText(BaseModel):
    address: str = Field(..., min_length=1)


class AddressFieldsResponse(BaseModel):
    address: str
    unit: str | None = None
    street: str
    suburb: str
    state: str
    postcode: str
    display: str


class CompareRequest(BaseModel):
    left: str
    right: str


class CompareResponse(BaseModel):
    result: int = Field(ge=-2, le=2)
    ordering: OrderingName
    differs_at_locality: bool
    approx_equal: bool


class StoredAddressResponse(BaseModel):
    address_id: int
    address: str
    created_at: datetime


class StoredAddressListResponse(BaseModel):
    addresses: list[StoredAddressResponse] = Field(default_factory=list)


class LocalityCount(BaseModel):
    state: str
    suburb: str
    count: int


class LocalityListResponse(BaseModel):
    localities: list[LocalityCount] = Field(default_factory=list)
