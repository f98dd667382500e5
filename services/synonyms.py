"""
Synonym Index

Reverse lookup from alternate ingredient phrasings to the canonical
catalog name, built once from INGREDIENT_SYNONYMS.
"""

from types import MappingProxyType

from constants import INGREDIENT_SYNONYMS


class SynonymIndex:
    """Read-only synonym lookup. All keys and values are lowercase."""

    def __init__(self, synonyms=None):
        if synonyms is None:
            synonyms = INGREDIENT_SYNONYMS

        forward = {}
        reverse = {}
        for canonical, phrases in synonyms.items():
            canonical_lower = canonical.lower()
            forward[canonical_lower] = tuple(p.lower() for p in phrases)
            for phrase in phrases:
                # A phrase listed under several names maps to the last one
                reverse[phrase.lower()] = canonical_lower

        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType(reverse)

    def __len__(self):
        return len(self._reverse)

    def canonical_for(self, phrase):
        """Canonical name for an alternate phrase, or None."""
        if not phrase:
            return None
        return self._reverse.get(phrase.lower().strip())

    def synonyms_for(self, canonical_name):
        """Alternate phrases listed for a canonical name (empty tuple if none)."""
        return self._forward.get(canonical_name.lower(), ())

    def suggest(self, query, catalog):
        """
        "Did you mean" lookup for a query with no direct match.

        Returns the properly cased catalog name the query is a synonym of,
        or None when the query is not a known synonym or the canonical
        name is not in the catalog.
        """
        canonical = self.canonical_for(query)
        if canonical is None:
            return None
        for entry in catalog:
            if entry.name.lower() == canonical:
                return entry.name
        return None


_default_index = None


def get_synonym_index():
    """Shared index over the built-in synonym table."""
    global _default_index
    if _default_index is None:
        _default_index = SynonymIndex()
    return _default_index
