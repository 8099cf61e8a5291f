# Item-name keywords -> category, as an ordered priority list.
# Categories are checked top to bottom and keywords left to right; the first
# keyword contained in the name decides. Some keywords are shared on purpose
# ("coat" resolves to Jackets, "hat"/"cap"/"beanie" to Accessories).

from typing import Tuple

CategoryRule = Tuple[str, Tuple[str, ...]]

CATEGORY_KEYWORDS: Tuple[CategoryRule, ...] = (
    # Footwear
    ("Sneakers", ("sneaker", "trainer", "running", "basketball", "jordan", "air max", "nike", "adidas")),
    ("Boots", ("boot", "chelsea", "combat", "hiking", "timberland")),
    ("Sandals", ("sandal", "flip flop", "slider", "birkenstock")),
    ("Dress Shoes", ("oxford", "loafer", "dress shoe", "formal")),
    ("Athletic Shoes", ("athletic", "gym", "cross training", "fitness")),
    # Tops
    ("T-Shirts", ("t-shirt", "tee", "tank top", "crop top")),
    ("Shirts", ("shirt", "blouse", "button up", "dress shirt")),
    ("Hoodies", ("hoodie", "sweatshirt", "pullover")),
    ("Sweaters", ("sweater", "jumper", "cardigan", "knit")),
    # Bottoms
    ("Jeans", ("jean", "denim")),
    ("Pants", ("pant", "trouser", "chino", "slack")),
    ("Shorts", ("short", "bermuda")),
    ("Skirts", ("skirt", "mini skirt", "maxi skirt")),
    ("Leggings", ("legging", "tight", "yoga pant")),
    # Dresses & outerwear
    ("Dresses", ("dress", "gown", "frock")),
    ("Jackets", ("jacket", "blazer", "coat")),
    ("Coats", ("coat", "parka", "trench")),
    ("Vests", ("vest", "waistcoat", "gilet")),
    # Accessories
    ("Accessories", ("belt", "scarf", "glove", "hat", "cap", "beanie")),
    ("Bags", ("bag", "backpack", "handbag", "purse", "wallet", "clutch")),
    ("Watches", ("watch", "timepiece", "smartwatch")),
    ("Jewelry", ("ring", "necklace", "bracelet", "earring", "chain")),
    ("Hats", ("hat", "cap", "beanie", "snapback", "bucket hat")),
    # Other goods
    (
        "Electronics",
        (
            "phone", "laptop", "tablet", "headphone", "speaker", "camera",
            "gaming", "console", "airpod", "iphone", "ipad", "macbook",
            "samsung", "playstation", "xbox", "nintendo",
        ),
    ),
    ("Collectibles", ("card", "figure", "collectible", "vintage", "rare", "limited edition", "pokemon", "funko")),
    ("Home & Living", ("candle", "pillow", "blanket", "decor", "furniture", "lamp", "mirror")),
)

CATEGORY_LABELS: Tuple[str, ...] = tuple(label for label, _ in CATEGORY_KEYWORDS)
