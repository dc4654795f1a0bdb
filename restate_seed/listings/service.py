import random
from typing import Optional

from restate_seed.config import Settings
from restate_seed.database import AppwriteDatabases, Document, unique_id
from restate_seed.listings.generator import (
    AGENT_COUNT,
    PROPERTY_COUNT,
    REVIEW_COUNT,
    build_agent,
    build_gallery_image,
    build_property,
    build_review,
)
from restate_seed.listings.images import GALLERY_IMAGES
from restate_seed.listings.models import SeedSummary


async def clear_collection(db: AppwriteDatabases, collection_id: str) -> int:
    """Delete every document on the first page of a collection.

    Deletes run one at a time. A failed delete propagates and leaves the
    collection partially cleared. Returns the number of documents deleted.
    """
    docs = await db.list_documents(collection_id)
    for doc in docs:
        await db.delete_document(collection_id, doc.id)
    return len(docs)


async def seed_agents(
    db: AppwriteDatabases, collection_id: str, rng: random.Random
) -> list[Document]:
    agents = []
    for i in range(1, AGENT_COUNT + 1):
        agent = build_agent(i, rng)
        agents.append(await db.create_document(collection_id, unique_id(), agent.model_dump()))
    return agents


async def seed_reviews(
    db: AppwriteDatabases, collection_id: str, rng: random.Random
) -> list[Document]:
    reviews = []
    for i in range(1, REVIEW_COUNT + 1):
        review = build_review(i, rng)
        reviews.append(await db.create_document(collection_id, unique_id(), review.model_dump()))
    return reviews


async def seed_galleries(db: AppwriteDatabases, collection_id: str) -> list[Document]:
    galleries = []
    for image in GALLERY_IMAGES:
        gallery = build_gallery_image(image)
        galleries.append(
            await db.create_document(collection_id, unique_id(), gallery.model_dump())
        )
    return galleries


async def seed_properties(
    db: AppwriteDatabases,
    collection_id: str,
    agents: list[Document],
    reviews: list[Document],
    galleries: list[Document],
    rng: random.Random,
) -> list[Document]:
    """Create the properties, each referencing records seeded just before it."""
    agent_ids = [a.id for a in agents]
    review_ids = [r.id for r in reviews]
    gallery_ids = [g.id for g in galleries]

    properties = []
    for i in range(1, PROPERTY_COUNT + 1):
        prop = build_property(i, agent_ids, review_ids, gallery_ids, rng)
        doc = await db.create_document(collection_id, unique_id(), prop.model_dump(mode="json"))
        print(f"🏠 Seeded property: {prop.name}")
        properties.append(doc)
    return properties


async def seed(
    db: AppwriteDatabases,
    settings: Settings,
    rng: Optional[random.Random] = None,
) -> SeedSummary:
    """Wipe the four listing collections and repopulate them.

    Runs strictly in sequence: clear all, then agents, reviews, galleries,
    and finally properties, which need ids from the first three. Any failure
    aborts the run where it happened; nothing is rolled back.
    """
    rng = rng or random.Random()

    for collection_id in settings.collections:
        await clear_collection(db, collection_id)
    print("✅ Cleared all existing data.")

    agents = await seed_agents(db, settings.agents_collection_id, rng)
    print(f"✅ Seeded {len(agents)} agents.")

    reviews = await seed_reviews(db, settings.reviews_collection_id, rng)
    print(f"✅ Seeded {len(reviews)} reviews.")

    galleries = await seed_galleries(db, settings.galleries_collection_id)
    print(f"✅ Seeded {len(galleries)} galleries.")

    properties = await seed_properties(
        db, settings.properties_collection_id, agents, reviews, galleries, rng
    )

    print("🎉 Data seeding completed.")
    return SeedSummary(
        agents=len(agents),
        reviews=len(reviews),
        galleries=len(galleries),
        properties=len(properties),
    )
