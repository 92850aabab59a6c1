import logging
from datetime import date

from shopreviews.domain.models.product import ProductDraft
from shopreviews.domain.repositories.catalog_store import CatalogStore
from shopreviews.domain.repositories.review_store import ReviewStore

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES = ["Accessories", "Audio", "Smart Home"]

# (name, description, price, category name)
SAMPLE_PRODUCTS = [
    ("USB-C Fast Charger 30W", "Compact GaN wall charger for phones and laptops.", 29.99, "Accessories"),
    ("Wireless Bluetooth Headphones", "Over-ear headphones with 30h battery life.", 89.99, "Audio"),
    ("Smart LED Light Bulb", "Wi-Fi colour bulb, works with voice assistants.", 14.99, "Smart Home"),
]

# Reviews for the first sample product: (source, author, rating, title, body, review_date, helpful, verified)
SAMPLE_REVIEWS = [
    ("Amazon", "Sarah Johnson", 5, "Excellent quality!",
     "This USB-C charger works perfectly with my laptop. Fast charging and solid build quality. Highly recommended for MacBook users.",
     date(2025, 9, 15), 12, True),
    ("Amazon", "Michael Chen", 4, "Good value for money",
     "Charges quickly and the cable is durable. Only complaint is it gets a bit warm during use, but that's normal.",
     date(2025, 9, 10), 8, True),
    ("Amazon", "Emily Rodriguez", 5, "Perfect for travel",
     "Compact design makes it easy to carry. Charges my phone and laptop without issues. Great purchase!",
     date(2025, 9, 5), 15, True),
    ("BestBuy", "David Kim", 4, "Reliable charger",
     "Works well with multiple devices. The build quality is solid and it charges at the advertised speed.",
     date(2025, 8, 28), 6, True),
    ("BestBuy", "Jessica Martinez", 3, "Decent but not perfect",
     "It works, but I expected faster charging. The cable is a bit short for my setup. Overall okay for the price.",
     date(2025, 8, 20), 3, False),
    ("Walmart", "Robert Taylor", 5, "Great product!",
     "Fast shipping and the charger works exactly as described. No complaints at all. Would buy again.",
     date(2025, 9, 12), 9, True),
    ("Walmart", "Amanda White", 4, "Solid purchase",
     "Good quality charger that handles multiple devices well. The price is reasonable for what you get.",
     date(2025, 9, 1), 5, True),
]


async def seed_sample_data(catalog: CatalogStore, reviews: ReviewStore) -> bool:
    """Insert demo categories, products and reviews. No-op unless the catalog is empty."""
    if await catalog.count_products() > 0:
        logger.info("seed skipped: catalog already has products")
        return False

    categories = {}
    for name in SAMPLE_CATEGORIES:
        categories[name] = await catalog.create_category(name)

    products = []
    for name, description, price, category in SAMPLE_PRODUCTS:
        products.append(await catalog.create_product(ProductDraft(
            name=name, description=description, price=price, category_id=categories[category].id,
        )))

    first = products[0]
    for source, author, rating, title, body, review_date, helpful, verified in SAMPLE_REVIEWS:
        await reviews.insert({
            "product_id": first.id,
            "source": source,
            "author": author,
            "rating": rating,
            "title": title,
            "body": body,
            "review_date": review_date,
            "helpful_votes": helpful,
            "verified_purchase": verified,
        })

    logger.info("seed done categories=%s products=%s reviews=%s", len(categories), len(products), len(SAMPLE_REVIEWS))
    return True
