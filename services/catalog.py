"""
Ingredient Catalog

Loads the static ingredient catalog (name, slug, image, category) used to
seed search and to resolve ingredient images by slug.
"""

import json
import logging
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    slug: str
    image: str = ''
    category: str = ''

    @property
    def key(self):
        """Stable identity used to deduplicate search results."""
        return (self.slug or self.name).lower()

    def to_dict(self):
        return asdict(self)


class Catalog:
    """Immutable catalog with case-insensitive image lookup by slug."""

    def __init__(self, entries):
        self.entries = tuple(entries)
        self._images = {e.slug.lower(): e.image for e in self.entries if e.slug}

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def image_for(self, slug):
        if not slug:
            return None
        return self._images.get(slug.lower())


def load_catalog(path):
    """
    Read catalog entries from a JSON array file.

    Entries without a name are skipped. A missing file yields an empty
    catalog so the app still starts; search then only returns nothing.
    """
    try:
        with open(path, encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.warning("Ingredient catalog not found at %s", path)
        return Catalog([])

    entries = []
    for item in raw:
        name = (item.get('name') or '').strip()
        if not name:
            continue
        entries.append(CatalogEntry(
            name=name,
            slug=(item.get('slug') or '').strip(),
            image=item.get('image') or '',
            category=item.get('category') or '',
        ))

    logger.info("Loaded %d catalog ingredients from %s", len(entries), path)
    return Catalog(entries)
