"""
Keyword-based dish classification.

Maps a free-text dish to one FoodCategory. Groups are checked in a fixed
priority order and the first hit wins, so "grilled ribeye steak" is
red-meat (checked before grilled-smoked).
"""

import re

from ..models.enums import FoodCategory

# Order matters: first matching group wins.
FOOD_CATEGORY_PATTERNS: list[tuple[FoodCategory, re.Pattern]] = [
    (FoodCategory.RED_MEAT, re.compile(
        r"beef|steak|lamb|venison|game|red meat|brisket|ribs", re.IGNORECASE)),
    (FoodCategory.WHITE_MEAT, re.compile(
        r"chicken|turkey|pork|veal|white meat", re.IGNORECASE)),
    (FoodCategory.FISH_SEAFOOD, re.compile(
        r"fish|salmon|tuna|cod|seafood|shrimp|lobster|crab|oyster|mussel|clam", re.IGNORECASE)),
    # Pasta often identifies Italian dishes
    (FoodCategory.PASTA, re.compile(
        r"pasta|spaghetti|linguine|penne|carbonara|bolognese|lasagna|ravioli|gnocchi", re.IGNORECASE)),
    (FoodCategory.CHEESE, re.compile(
        r"cheese|camembert|brie|cheddar|gouda|parmesan|blue cheese", re.IGNORECASE)),
    # Includes Swedish "grillad" / "rökt"
    (FoodCategory.GRILLED_SMOKED, re.compile(
        r"grilled|grillad|bbq|barbecue|smoked|rökt", re.IGNORECASE)),
    (FoodCategory.RICH_FATTY, re.compile(
        r"cream|butter|fried|creamy|rich|fatty|truffle", re.IGNORECASE)),
    (FoodCategory.SPICY, re.compile(
        r"spicy|curry|chili|hot|thai|indian|mexican", re.IGNORECASE)),
    (FoodCategory.VEGETABLES, re.compile(
        r"vegetable|salad|greens|mushroom|vegetarian", re.IGNORECASE)),
    (FoodCategory.DESSERT, re.compile(
        r"dessert|cake|chocolate|pie|tart|sweet", re.IGNORECASE)),
]


def classify_food(dish: str) -> FoodCategory:
    """Return the category of the first keyword group the dish matches, else UNKNOWN."""
    if not dish:
        return FoodCategory.UNKNOWN

    for category, pattern in FOOD_CATEGORY_PATTERNS:
        if pattern.search(dish):
            return category

    return FoodCategory.UNKNOWN
