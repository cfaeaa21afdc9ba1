# hotel_search/models/cities.py

from pydantic import BaseModel


class CityOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
