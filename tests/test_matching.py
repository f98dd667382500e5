"""Tests for word-boundary aware match scoring."""

from services.matching import calculate_match_score


def test_name_starts_with_query():
    assert calculate_match_score('oat', 'Oat Bran') == 0.00
    assert calculate_match_score('OAT', 'oat bran') == 0.00


def test_word_starts_with_query():
    assert calculate_match_score('oat', 'Steel Cut Oats') == 0.05
    assert calculate_match_score('brown', 'Sugar, Brown') == 0.05
    assert calculate_match_score('oatmeal', 'Oats / Oatmeal') == 0.05


def test_all_query_tokens_match_words_in_any_order():
    assert calculate_match_score('cheese goat', 'Goat Cheese') == 0.08
    assert calculate_match_score('cut oats', 'Steel Cut Oats') == 0.08


def test_partial_token_match_falls_through():
    """Every token must match; otherwise only a substring hit can score."""
    assert calculate_match_score('goat milk', 'Goat Cheese') is None


def test_substring_not_at_word_boundary():
    assert calculate_match_score('oat', 'Goat Cheese') == 0.30


def test_no_match():
    assert calculate_match_score('oat', 'Chickpeas') is None


def test_empty_query_never_matches():
    assert calculate_match_score('', 'Oat Bran') is None
    assert calculate_match_score('   ', 'Oat Bran') is None


def test_ranking_order_for_oat():
    """Prefix beats word prefix beats mid-word substring."""
    names = ['Goat Cheese', 'Steel Cut Oats', 'Oat Bran']
    ranked = sorted(names, key=lambda n: calculate_match_score('oat', n))
    assert ranked == ['Oat Bran', 'Steel Cut Oats', 'Goat Cheese']
