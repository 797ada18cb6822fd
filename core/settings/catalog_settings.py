import os
import json

# Default category taxonomy (category -> allowed subcategories).
# A deployment can swap it out by pointing CATALOG_TAXONOMY_FILE at a JSON object
# of the same shape.
CATALOG_TAXONOMY = {
    'accessories': [
        'sunglasses',
        'wrist-watches',
        'belts',
        'bangles-bracelet',
        'earrings',
        'necklace',
        'pearls',
    ],
    'fragrance': [
        'designer-niche',
        'unboxed',
        'testers',
        'arabian',
        'diffuser',
        'mist',
    ],
    'bags': [],
    'clothes': [],
    'jewerly': [],
}

taxonomy_file = os.environ.get("CATALOG_TAXONOMY_FILE")

if taxonomy_file:
    with open(taxonomy_file, encoding="utf-8") as fh:
        CATALOG_TAXONOMY = json.load(fh)

# Upper bound of the related-products list.
RELATED_PRODUCTS_LIMIT = int(os.environ.get("RELATED_PRODUCTS_LIMIT", 20))

# Upper bound of the quick search list.
PRODUCTS_SEARCH_LIMIT = int(os.environ.get("PRODUCTS_SEARCH_LIMIT", 20))

PRODUCTS_DEFAULT_PAGE_SIZE = 10
PRODUCTS_MAX_PAGE_SIZE = 100

# Absolute image URLs on this host are stored as site-relative paths.
SITE_DOMAIN = os.environ.get("SITE_DOMAIN", "feb-backend.vercel.app")
