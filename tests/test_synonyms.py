"""Tests for the synonym index."""

from services.catalog import CatalogEntry
from services.synonyms import SynonymIndex, get_synonym_index


def test_reverse_lookup():
    index = get_synonym_index()
    assert index.canonical_for('garbanzo beans') == 'chickpeas'
    assert index.canonical_for('Aubergine') == 'eggplant'
    assert index.canonical_for('  scallion  ') is None
    assert index.canonical_for('green onions') == 'scallions'


def test_unknown_phrase():
    index = get_synonym_index()
    assert index.canonical_for('unobtainium') is None
    assert index.canonical_for('') is None


def test_synonyms_for_canonical_name():
    index = get_synonym_index()
    assert 'garbanzo beans' in index.synonyms_for('Chickpeas')
    assert index.synonyms_for('not an ingredient') == ()


def test_custom_table_is_lowercased():
    index = SynonymIndex({'Oat Bran': ['Oat Fiber', 'BRAN']})
    assert index.canonical_for('oat fiber') == 'oat bran'
    assert index.canonical_for('bran') == 'oat bran'
    assert len(index) == 2


def test_last_listing_wins_for_shared_phrase():
    index = SynonymIndex({'tomato paste': ['tomato puree'], 'tomato sauce': ['tomato puree']})
    assert index.canonical_for('tomato puree') == 'tomato sauce'


def test_suggest_returns_catalog_spelling():
    catalog = [CatalogEntry(name='Chickpeas', slug='chickpeas')]
    index = get_synonym_index()
    assert index.suggest('garbanzo beans', catalog) == 'Chickpeas'
    assert index.suggest('aubergine', catalog) is None
    assert index.suggest('nothing', catalog) is None
