# ---------------------------------------------------------------------------
# Static image pools
# ---------------------------------------------------------------------------

# Agent avatars, picked with replacement
AGENT_IMAGES = [
    "https://randomuser.me/api/portraits/men/32.jpg",
    "https://randomuser.me/api/portraits/women/44.jpg",
    "https://randomuser.me/api/portraits/men/75.jpg",
    "https://randomuser.me/api/portraits/women/68.jpg",
]

# Reviewer avatars, picked with replacement
REVIEW_IMAGES = [
    "https://randomuser.me/api/portraits/women/12.jpg",
    "https://randomuser.me/api/portraits/men/22.jpg",
    "https://randomuser.me/api/portraits/women/29.jpg",
    "https://randomuser.me/api/portraits/men/41.jpg",
    "https://randomuser.me/api/portraits/women/57.jpg",
]

# One gallery document per entry. Keep at least 8 so the largest gallery
# subset a property can draw is never truncated.
GALLERY_IMAGES = [
    "https://picsum.photos/seed/restate-gallery-01/1200/800",
    "https://picsum.photos/seed/restate-gallery-02/1200/800",
    "https://picsum.photos/seed/restate-gallery-03/1200/800",
    "https://picsum.photos/seed/restate-gallery-04/1200/800",
    "https://picsum.photos/seed/restate-gallery-05/1200/800",
    "https://picsum.photos/seed/restate-gallery-06/1200/800",
    "https://picsum.photos/seed/restate-gallery-07/1200/800",
    "https://picsum.photos/seed/restate-gallery-08/1200/800",
    "https://picsum.photos/seed/restate-gallery-09/1200/800",
    "https://picsum.photos/seed/restate-gallery-10/1200/800",
    "https://picsum.photos/seed/restate-gallery-11/1200/800",
    "https://picsum.photos/seed/restate-gallery-12/1200/800",
]

# Cover images; property i uses PROPERTY_IMAGES[i] while i is in range
PROPERTY_IMAGES = [
    "https://picsum.photos/seed/restate-property-00/1200/800",
    "https://picsum.photos/seed/restate-property-01/1200/800",
    "https://picsum.photos/seed/restate-property-02/1200/800",
    "https://picsum.photos/seed/restate-property-03/1200/800",
    "https://picsum.photos/seed/restate-property-04/1200/800",
    "https://picsum.photos/seed/restate-property-05/1200/800",
    "https://picsum.photos/seed/restate-property-06/1200/800",
    "https://picsum.photos/seed/restate-property-07/1200/800",
    "https://picsum.photos/seed/restate-property-08/1200/800",
    "https://picsum.photos/seed/restate-property-09/1200/800",
    "https://picsum.photos/seed/restate-property-10/1200/800",
    "https://picsum.photos/seed/restate-property-11/1200/800",
    "https://picsum.photos/seed/restate-property-12/1200/800",
    "https://picsum.photos/seed/restate-property-13/1200/800",
]
