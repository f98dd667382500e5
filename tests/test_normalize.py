"""Tests for canonical ingredient names."""

from services.normalize import normalize_ingredient_name


def test_irregular_plurals():
    """Irregular plurals come from the exception table."""
    assert normalize_ingredient_name('Tomatoes') == 'tomato'
    assert normalize_ingredient_name('Leaves') == 'leaf'
    assert normalize_ingredient_name('potatoes') == 'potato'
    assert normalize_ingredient_name('Loaves') == 'loaf'


def test_ies_becomes_y():
    assert normalize_ingredient_name('Berries') == 'berry'
    assert normalize_ingredient_name('cherries') == 'cherry'


def test_es_and_s_suffixes():
    """Trailing 'es' and 's' are dropped."""
    assert normalize_ingredient_name('Dishes') == 'dish'
    assert normalize_ingredient_name('Carrots') == 'carrot'
    assert normalize_ingredient_name('Onions') == 'onion'


def test_words_that_are_not_plural():
    """No false singularization of 'ss' endings or consonant + e words."""
    assert normalize_ingredient_name('Cookie') == 'cookie'
    assert normalize_ingredient_name('Swiss') == 'swiss'
    assert normalize_ingredient_name('Garlic') == 'garlic'


def test_short_names_kept():
    """Length guards stop 'es' and 's' from eating short names."""
    assert normalize_ingredient_name('es') == 'es'
    assert normalize_ingredient_name('as') == 'as'


def test_lowercases_and_trims():
    assert normalize_ingredient_name('  Chicken Breast  ') == 'chicken breast'


def test_empty_input():
    assert normalize_ingredient_name('') == ''
    assert normalize_ingredient_name(None) == ''


def test_plural_and_singular_share_identity():
    """Both spellings map to the same canonical name."""
    assert normalize_ingredient_name('Lemons') == normalize_ingredient_name('lemon')
