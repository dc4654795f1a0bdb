from enum import Enum

from pydantic import BaseModel, Field


class PropertyType(str, Enum):
    HOUSE = "House"
    TOWNHOUSE = "Townhouse"
    CONDO = "Condo"
    DUPLEX = "Duplex"
    STUDIO = "Studio"
    VILLA = "Villa"
    APARTMENT = "Apartment"
    OTHER = "Other"


class Facility(str, Enum):
    LAUNDRY = "Laundry"
    PARKING = "Parking"
    GYM = "Gym"
    WIFI = "Wifi"
    PET_FRIENDLY = "Pet-friendly"


class Agent(BaseModel):
    """A listing agent. Referenced by exactly one id from each property."""

    name: str  # e.g. "Agent 3"
    email: str  # e.g. "agent3@example.com"
    avatar: str  # Image URL from the agent pool


class Review(BaseModel):
    name: str  # Reviewer display name, e.g. "Reviewer 12"
    avatar: str  # Image URL from the review pool
    review: str  # Review body text
    rating: int = Field(ge=1, le=5)


class GalleryImage(BaseModel):
    image: str  # Image URL from the gallery pool


class Property(BaseModel):
    """A listing as stored in the properties collection.

    Relationship attributes (`agent`, `reviews`, `gallery`) hold document ids
    of records created earlier in the same run. Numeric bounds mirror the
    ranges the generator draws from, so a bad draw fails validation instead
    of reaching the database.
    """

    name: str
    type: PropertyType
    description: str
    address: str
    geolocation: str  # "lat, lng" as a single string
    price: int = Field(ge=1000, le=9999)  # USD
    area: int = Field(ge=500, le=3499)  # Square feet
    bedrooms: int = Field(ge=1, le=5)
    bathrooms: int = Field(ge=1, le=5)
    rating: int = Field(ge=1, le=5)
    facilities: list[Facility] = Field(min_length=1)
    image: str
    agent: str  # Agent document id
    reviews: list[str]  # Review document ids
    gallery: list[str]  # Gallery document ids


class SeedSummary(BaseModel):
    """Counts of documents created by one seeding run."""

    agents: int = 0
    reviews: int = 0
    galleries: int = 0
    properties: int = 0
