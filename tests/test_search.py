"""Tests for catalog search ranking."""

import os
from unittest import mock

from services.catalog import CatalogEntry, load_catalog
from services.search import IngredientSearch, approximate_search, search_ingredients
from services.synonyms import SynonymIndex

FIXTURE_CATALOG = os.path.join(os.path.dirname(__file__), 'fixtures', 'catalog.json')
SHIPPED_CATALOG = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'data', 'ingredients.json')


def entries(*names):
    return [CatalogEntry(name=name, slug=name.lower().replace(' ', '-')) for name in names]


def names(results):
    return [entry.name for entry in results]


def test_word_boundary_ranking():
    """Typing "oat" finds oat products before goat cheese."""
    catalog = entries('Goat Cheese', 'Steel Cut Oats', 'Oat Bran')
    results = search_ingredients('oat', catalog, limit=12)
    assert names(results) == ['Oat Bran', 'Steel Cut Oats', 'Goat Cheese']


def test_synonym_finds_canonical_entry_first():
    catalog = load_catalog(FIXTURE_CATALOG)
    results = IngredientSearch(catalog).search('garbanzo beans', limit=12)
    assert results
    assert results[0].name == 'Chickpeas'


def test_typo_falls_back_to_approximate_match():
    catalog = load_catalog(FIXTURE_CATALOG)
    results = IngredientSearch(catalog).search('chiken', limit=5)
    assert results[0].name == 'Chicken'
    assert 'Chicken Breast' in names(results)


def test_empty_query_returns_nothing():
    search = IngredientSearch(entries('Oat Bran'))
    assert search.search('') == []
    assert search.search('   ') == []
    assert search.search(None) == []


def test_limit_is_respected():
    catalog = entries('Chicken', 'Chicken Breast', 'Chicken Wings', 'Chicken Thighs')
    results = search_ingredients('chicken', catalog, limit=2)
    assert names(results) == ['Chicken', 'Chicken Breast']


def test_ties_keep_catalog_order():
    catalog = entries('Chicken Wings', 'Chicken Breast', 'Chicken')
    results = search_ingredients('chicken', catalog, limit=3)
    assert names(results) == ['Chicken Wings', 'Chicken Breast', 'Chicken']


def test_duplicate_slugs_are_returned_once():
    catalog = [
        CatalogEntry(name='Oat Bran', slug='oat-bran'),
        CatalogEntry(name='Oat Bran (bulk)', slug='OAT-BRAN'),
    ]
    results = search_ingredients('oat', catalog, limit=5)
    assert names(results) == ['Oat Bran']


def test_search_is_deterministic():
    catalog = load_catalog(FIXTURE_CATALOG)
    search = IngredientSearch(catalog)
    assert search.search('chee', limit=6) == search.search('chee', limit=6)


def test_no_match_gives_empty_list():
    search = IngredientSearch(entries('Oat Bran', 'Goat Cheese'))
    assert search.search('zzzzqqq') == []


def test_suggest_for_synonym_query():
    search = IngredientSearch(load_catalog(FIXTURE_CATALOG))
    assert search.suggest('garbanzo beans') == 'Chickpeas'
    assert search.suggest('zzzzqqq') is None


def test_approximate_search_scores_are_normalized():
    matches = approximate_search('chiken', ['chicken', 'salmon'])
    assert [index for index, _ in matches] == [0]
    assert 0 <= matches[0][1] < 0.4


def test_direct_match_beats_synonym_match():
    """A name match outranks an equally good match through a synonym."""
    catalog = entries('Chickpeas', 'Garbanzo Bean Salad')
    synonyms = SynonymIndex({'chickpeas': ['garbanzo']})
    results = IngredientSearch(catalog, synonyms=synonyms).search('garbanzo', limit=5)
    assert names(results) == ['Garbanzo Bean Salad', 'Chickpeas']


@mock.patch('services.search.approximate_search')
def test_approximate_pass_skipped_when_limit_filled(mock_approximate):
    catalog = entries('Chicken', 'Chicken Breast', 'Chicken Wings', 'Chicken Thighs')
    results = search_ingredients('chicken', catalog, limit=2)
    assert names(results) == ['Chicken', 'Chicken Breast']
    mock_approximate.assert_not_called()


@mock.patch('services.search.approximate_search', return_value=[])
def test_approximate_pass_runs_when_few_direct_matches(mock_approximate):
    search_ingredients('chicken', entries('Chicken', 'Goat Cheese'), limit=5)
    assert mock_approximate.called


def test_typo_ranks_name_above_synonym_text():
    """Eggs lists "chicken eggs" as a synonym; the Chicken entry still wins."""
    search = IngredientSearch(load_catalog(SHIPPED_CATALOG))
    results = search.search('chiken', limit=8)
    assert results[0].name == 'Chicken'


def test_short_query_has_no_loose_matches():
    search = IngredientSearch(load_catalog(SHIPPED_CATALOG))
    ranked = names(search.search('oat', limit=8))
    goat_position = ranked.index('Goat Cheese')
    assert all('oat' in name.lower() for name in ranked[:goat_position + 1])
    assert 'Carrots' not in ranked
    assert 'Molasses' not in ranked


def test_short_query_needs_exact_substring():
    assert approximate_search('oat', ['carrots', 'goat cheese']) == [(1, 0.0)]


def test_field_weights_order_matches():
    """Same text found in the name scores better than in the category."""
    catalog = [
        CatalogEntry(name='Broth Cubes', slug='broth-cubes', category='Soups'),
        CatalogEntry(name='Stock Pot Paste', slug='stock-pot-paste', category='Broths'),
    ]
    search = IngredientSearch(catalog, synonyms=SynonymIndex({}))
    assert names(search.search('brotj', limit=5)) == ['Broth Cubes', 'Stock Pot Paste']
