"""
Ingredient Search Service

Ranks catalog ingredients against a partial, possibly misspelled or
synonym-based query.

Pass 1 scores every entry with the word-boundary scorer, both for the raw
query and for its synonym's canonical name (with a penalty). Pass 2 only
runs when pass 1 found fewer than `limit` entries and fills the remaining
slots from an approximate (typo tolerant) match over the name, the
combined name/category/synonym text and the category, weighted in that
order.
"""

import logging

from rapidfuzz import fuzz, process, utils

from .matching import calculate_match_score
from .synonyms import get_synonym_index

logger = logging.getLogger(__name__)

# Added to a match found through a synonym's canonical name
SYNONYM_PENALTY = 0.15

# Approximate matches scoring above this (0 = exact, 1 = anything) are dropped
DEFAULT_THRESHOLD = 0.4
DEFAULT_LIMIT = 12

# Queries this short must appear verbatim; one wrong letter is a third of the word
SHORT_QUERY_LENGTH = 3

# Weight of each field relative to the name. A perfect hit on a field
# scores 1 - weight, so text outside the name never beats a name substring.
FIELD_WEIGHTS = (
    ('name', 1.0),
    ('search_terms', 0.6),
    ('category', 0.4),
)


def approximate_search(query, corpus, threshold=DEFAULT_THRESHOLD, limit=None):
    """
    Typo tolerant search over a list of strings.

    Returns (index, score) pairs best-first, score on a 0..1 scale where
    lower is better, only for entries scoring at or below `threshold`.
    Queries of SHORT_QUERY_LENGTH characters or fewer only match where
    they appear exactly.
    """
    processed = utils.default_process(query)
    if not processed:
        return []

    if len(processed) <= SHORT_QUERY_LENGTH:
        cutoff = 100
    else:
        cutoff = (1 - threshold) * 100

    matches = process.extract(
        processed,
        corpus,
        scorer=fuzz.partial_ratio,
        processor=utils.default_process,
        limit=limit,
        score_cutoff=cutoff,
    )
    return [(index, round(1 - similarity / 100, 4)) for _, similarity, index in matches]


class IngredientSearch:
    """
    Search index over a fixed catalog. Rebuild it when the catalog changes.
    """

    def __init__(self, catalog, synonyms=None, threshold=DEFAULT_THRESHOLD):
        self.entries = tuple(catalog)
        self.synonyms = synonyms if synonyms is not None else get_synonym_index()
        self.threshold = threshold

        self.fields = {
            'name': [entry.name for entry in self.entries],
            # Name, category and every synonym of the name, as one string per entry
            'search_terms': [
                ' '.join([entry.name, entry.category, *self.synonyms.synonyms_for(entry.name)])
                for entry in self.entries
            ],
            'category': [entry.category for entry in self.entries],
        }

    def search(self, query, limit=DEFAULT_LIMIT):
        """Return up to `limit` catalog entries, best match first."""
        if not query or not query.strip() or limit <= 0:
            return []

        query_lower = query.lower().strip()
        canonical = self.synonyms.canonical_for(query_lower)

        # entry key -> (score, catalog position)
        best = {}

        for position, entry in enumerate(self.entries):
            scores = []

            direct = calculate_match_score(query_lower, entry.name)
            if direct is not None:
                scores.append(direct)

            if canonical:
                via_synonym = calculate_match_score(canonical, entry.name)
                if via_synonym is not None:
                    scores.append(via_synonym + SYNONYM_PENALTY)

            if scores:
                self._keep_best(best, entry.key, min(scores), position)

        structural_count = len(best)

        if structural_count < limit:
            approximate = self._approximate_scores(query_lower, limit * 2)
            for position, score in sorted(approximate.items(), key=lambda item: (item[1], item[0])):
                key = self.entries[position].key
                if key not in best:
                    best[key] = (score, position)

        logger.debug("Search %r: %d structural, %d total candidates",
                     query_lower, structural_count, len(best))

        ranked = sorted(best.values())
        return [self.entries[position] for _, position in ranked[:limit]]

    def _approximate_scores(self, query, limit):
        """Best weighted score per catalog position over all fields."""
        scores = {}
        for field, weight in FIELD_WEIGHTS:
            for position, distance in approximate_search(
                    query, self.fields[field], self.threshold, limit):
                score = round(1 - (1 - distance) * weight, 4)
                if position not in scores or score < scores[position]:
                    scores[position] = score
        return scores

    @staticmethod
    def _keep_best(best, key, score, position):
        current = best.get(key)
        if current is None or (score, position) < current:
            best[key] = (score, position)

    def suggest(self, query):
        """Catalog name the query is a synonym of, for "did you mean"."""
        return self.synonyms.suggest(query, self.entries)


def search_ingredients(query, catalog, limit=DEFAULT_LIMIT):
    """One-off search; builds a throwaway index over `catalog`."""
    return IngredientSearch(catalog).search(query, limit)
