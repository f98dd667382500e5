"""
Ingredient Match Scoring

Word-boundary aware relevance score between a search query and an
ingredient name. Lower is better; None means no match.
"""

import re

# Word separators inside ingredient names ("Sugar, Brown", "Oats / Oatmeal")
WORD_SPLIT_RE = re.compile(r'[\s,/\-()]+')

STARTS_WITH_SCORE = 0.00
WORD_PREFIX_SCORE = 0.05
ALL_TOKENS_SCORE = 0.08
WHOLE_WORD_SCORE = 0.10
SUBSTRING_SCORE = 0.30


def split_words(name):
    return [w for w in WORD_SPLIT_RE.split(name.lower()) if w]


def calculate_match_score(query, name):
    """
    Score how well `name` matches `query` (case-insensitive).

    Checked in order, first hit wins:
    0.00 - name starts with query ("oat" -> "Oat Bran")
    0.05 - a word in name starts with query ("oat" -> "Steel Cut Oats")
    0.08 - multi-word query, every token starts some word of name, any order
           ("cheese goat" -> "Goat Cheese")
    0.10 - query equals a whole word of name
    0.30 - query is a substring, not at a word boundary ("oat" -> "Goat Cheese")
    None - query does not appear in name
    """
    query_lower = query.lower().strip()
    name_lower = name.lower()
    if not query_lower:
        return None

    name_words = split_words(name_lower)

    if name_lower.startswith(query_lower):
        return STARTS_WITH_SCORE

    if any(word.startswith(query_lower) for word in name_words):
        return WORD_PREFIX_SCORE

    query_tokens = query_lower.split()
    if len(query_tokens) > 1:
        if all(any(word.startswith(token) for word in name_words) for token in query_tokens):
            return ALL_TOKENS_SCORE

    if query_lower in name_words:
        return WHOLE_WORD_SCORE

    if query_lower in name_lower:
        return SUBSTRING_SCORE

    return None
