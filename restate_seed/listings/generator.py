"""Pure builders for seed records.

Nothing here touches the network. Every random draw goes through the `rng`
argument (anything with the `random.Random` interface), so tests can pass a
seeded generator and production passes a fresh unseeded one.
"""

import random
from typing import Sequence, TypeVar

from restate_seed.listings.images import (
    AGENT_IMAGES,
    PROPERTY_IMAGES,
    REVIEW_IMAGES,
)
from restate_seed.listings.models import (
    Agent,
    Facility,
    GalleryImage,
    Property,
    PropertyType,
    Review,
)

T = TypeVar("T")

AGENT_COUNT = 5
REVIEW_COUNT = 20
PROPERTY_COUNT = 20

REVIEWS_PER_PROPERTY = (5, 7)
GALLERY_PER_PROPERTY = (3, 8)

PRICE_RANGE = (1000, 9999)
AREA_RANGE = (500, 3499)
ROOM_RANGE = (1, 5)
RATING_RANGE = (1, 5)


def random_subset(
    items: Sequence[T], min_items: int, max_items: int, rng: random.Random
) -> list[T]:
    """Pick a duplicate-free random subset of `items`.

    The size is drawn uniformly from [min_items, max_items]. Selection is a
    shuffle of a copy followed by truncation, so if `items` holds fewer than
    the drawn size the result is simply shorter.
    """
    size = rng.randint(min_items, max_items)
    pool = list(items)
    rng.shuffle(pool)
    return pool[:size]


def build_agent(index: int, rng: random.Random) -> Agent:
    return Agent(
        name=f"Agent {index}",
        email=f"agent{index}@example.com",
        avatar=rng.choice(AGENT_IMAGES),
    )


def build_review(index: int, rng: random.Random) -> Review:
    return Review(
        name=f"Reviewer {index}",
        avatar=rng.choice(REVIEW_IMAGES),
        review=f"This is a review by Reviewer {index}.",
        rating=rng.randint(*RATING_RANGE),
    )


def build_gallery_image(image: str) -> GalleryImage:
    return GalleryImage(image=image)


def pick_property_image(index: int, rng: random.Random) -> str:
    # Positional while the pool lasts, random after that
    if index < len(PROPERTY_IMAGES):
        return PROPERTY_IMAGES[index]
    return rng.choice(PROPERTY_IMAGES)


def build_property(
    index: int,
    agent_ids: Sequence[str],
    review_ids: Sequence[str],
    gallery_ids: Sequence[str],
    rng: random.Random,
) -> Property:
    """Build property `index` (1-based) wired to previously created records.

    - agent: one id, uniform with replacement across properties
    - reviews: 5-7 distinct ids
    - gallery: 3-8 distinct ids
    - facilities: non-empty distinct subset of the facility vocabulary
    """
    facilities = list(Facility)
    return Property(
        name=f"Property {index}",
        type=rng.choice(list(PropertyType)),
        description=f"This is the description for Property {index}.",
        address=f"123 Property Street, City {index}",
        geolocation=f"192.168.1.{index}, 192.168.1.{index}",
        price=rng.randint(*PRICE_RANGE),
        area=rng.randint(*AREA_RANGE),
        bedrooms=rng.randint(*ROOM_RANGE),
        bathrooms=rng.randint(*ROOM_RANGE),
        rating=rng.randint(*RATING_RANGE),
        facilities=random_subset(facilities, 1, len(facilities), rng),
        image=pick_property_image(index, rng),
        agent=rng.choice(agent_ids),
        reviews=random_subset(review_ids, *REVIEWS_PER_PROPERTY, rng),
        gallery=random_subset(gallery_ids, *GALLERY_PER_PROPERTY, rng),
    )
