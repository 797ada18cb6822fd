import re
from typing import Iterable, Mapping, Optional, Tuple

from django.conf import settings
from rest_framework.exceptions import ValidationError

# Pseudo-category meaning "no category constraint".
ALL_CATEGORIES = "all"

_WHITESPACE = re.compile(r"\s+")


def normalize_slug(value: Optional[str]) -> str:
    """
    Normalize a category or subcategory name: trim, lowercase and turn runs of
    whitespace into a single hyphen ("Wrist Watches" -> "wrist-watches").
    Missing values normalize to an empty string.
    """
    if value is None:
        return ""
    return _WHITESPACE.sub("-", str(value).strip().lower())


class CategoryTaxonomy:
    """
    Category -> allowed subcategories mapping.

    Built from plain data so every deployment can ship its own catalog
    structure (see ``CATALOG_TAXONOMY`` in settings).
    """

    def __init__(self, categories: Mapping[str, Iterable[str]]):
        self._categories = {
            normalize_slug(name): frozenset(normalize_slug(sub) for sub in subcategories)
            for name, subcategories in categories.items()
        }

    @classmethod
    def from_settings(cls) -> "CategoryTaxonomy":
        return cls(settings.CATALOG_TAXONOMY)

    @property
    def categories(self) -> list:
        return sorted(self._categories)

    def is_category(self, name: str) -> bool:
        return normalize_slug(name) in self._categories

    def subcategories(self, category: str) -> frozenset:
        return self._categories.get(normalize_slug(category), frozenset())

    def validate(self, category: Optional[str], subcategory: Optional[str] = None) -> Tuple[str, str]:
        """
        Normalize a category/subcategory pair and check it against the taxonomy.

        Returns the normalized ``(category, subcategory)``; raises
        ``ValidationError`` for an unknown category or for a subcategory that
        is not registered under its category. ``"all"`` accepts any subcategory.
        """
        category = normalize_slug(category)
        subcategory = normalize_slug(subcategory)

        if not category:
            raise ValidationError({"category": "Category is required."})

        if category == ALL_CATEGORIES:
            return category, subcategory

        if category not in self._categories:
            allowed = ", ".join(self.categories)
            raise ValidationError({"category": f"Invalid category '{category}'. Allowed: {allowed}."})

        if subcategory and subcategory not in self.subcategories(category):
            raise ValidationError({
                "subcategory": f"Subcategory '{subcategory}' does not belong to category '{category}'."
            })

        return category, subcategory

    def as_dict(self) -> dict:
        return {name: sorted(subs) for name, subs in sorted(self._categories.items())}


def get_taxonomy() -> CategoryTaxonomy:
    return CategoryTaxonomy.from_settings()
