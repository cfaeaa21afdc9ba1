# hotel_search/models/hotels.py

from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, field_validator

# hotels.price is NUMERIC(10, 2)
CENTS = Decimal("0.01")


class HotelOut(BaseModel):
    """
    A hotel row with its resolved city name.

    `price` stays a Decimal end to end, so in JSON it is a decimal string
    with two places ("120.00") rather than a number.
    """

    id: int
    name: str
    city_id: Optional[int] = None
    # "" when the hotel's city reference is NULL or matches no city
    city_name: str = ""
    capacity: int
    price: Decimal

    @field_validator("price")
    @classmethod
    def _two_places(cls, value: Decimal) -> Decimal:
        try:
            return value.quantize(CENTS)
        except InvalidOperation:
            raise ValueError(f"price {value} does not fit two decimal places")

    class Config:
        from_attributes = True
