from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from postaddress.core.config import get_settings
from postaddress.domain.views import show
from postaddress.schemas.addresses import (
    AddressFieldsResponse,
    AddressText,
    CompareRequest,
    CompareResponse,
    ListOrder,
    LocalityCount,
    LocalityListResponse,
    StoredAddressListResponse,
    StoredAddressResponse,
)
from postaddress.services.address_book import (
    AddressBookService,
    get_address_book_service,
)


router = APIRouter()


def get_service() -> AddressBookService:
    settings = get_settings()
    return get_address_book_service(settings.database_path, settings.default_order)


@router.post("/parse", response_model=AddressFieldsResponse)
async def parse_address(
    payload: AddressText,
    service: AddressBookService = Depends(get_service),
) -> AddressFieldsResponse:
    address = service.parse(payload.address)
    fields = address.fields
    return AddressFieldsResponse(
        address=address.text,
        unit=fields.unit,
        street=fields.street,
        suburb=fields.suburb,
        state=fields.state,
        postcode=fields.postcode,
        display=show(address),
    )


@router.post("/compare", response_model=CompareResponse)
async def compare_addresses(
    payload: CompareRequest,
    service: AddressBookService = Depends(get_service),
) -> CompareResponse:
    result = service.compare(payload.left, payload.right)
    return CompareResponse(
        result=result.code,
        ordering=result.ordering.name.lower(),
        differs_at_locality=result.differs_at_locality,
        approx_equal=not result.differs_at_locality,
    )


@router.post(
    "/",
    response_model=StoredAddressResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_address(
    payload: AddressText,
    service: AddressBookService = Depends(get_service),
) -> StoredAddressResponse:
    return service.add(payload.address).to_response()


@router.get("/", response_model=StoredAddressListResponse)
async def list_addresses(
    order: ListOrder | None = Query(default=None),
    service: AddressBookService = Depends(get_service),
) -> StoredAddressListResponse:
    records = service.list(order)
    return StoredAddressListResponse(
        addresses=[record.to_response() for record in records]
    )


@router.get("/approx", response_model=StoredAddressListResponse)
async def find_approx_addresses(
    address: str = Query(..., min_length=1),
    service: AddressBookService = Depends(get_service),
) -> StoredAddressListResponse:
    records = service.find_approx(address)
    return StoredAddressListResponse(
        addresses=[record.to_response() for record in records]
    )


@router.get("/localities", response_model=LocalityListResponse)
async def list_localities(
    service: AddressBookService = Depends(get_service),
) -> LocalityListResponse:
    return LocalityListResponse(
        localities=[
            LocalityCount(state=state, suburb=suburb, count=count)
            for state, suburb, count in service.localities()
        ]
    )


@router.get("/{address_id}", response_model=StoredAddressResponse)
async def get_address(
    address_id: int,
    service: AddressBookService = Depends(get_service),
) -> StoredAddressResponse:
    record = service.get(address_id)
    if record is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Address not found")
    return record.to_response()


@router.delete("/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(
    address_id: int,
    service: AddressBookService = Depends(get_service),
) -> None:
    if not service.delete(address_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Address not found")
