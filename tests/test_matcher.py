from recipe_safety.services.matcher import SubstringMatcher, matches, word_matcher


def test_substring_match_is_case_insensitive():
    assert matches("1 tbsp Peanut Butter", "peanut butter")
    assert matches("1 tbsp peanut butter", "PEANUT")


def test_term_must_be_contained():
    assert not matches("1 cup flour", "sugar")
    assert not matches("milk", "whole milk")


def test_empty_term_never_matches():
    matcher = SubstringMatcher()
    assert not matcher.matches("1 cup milk", "")
    assert not matcher.matches("1 cup milk", "   ")
    assert not matcher.matches("", "milk")


def test_no_stemming_or_synonyms():
    assert not matches("2 egg whites", "eggs")
    assert not matches("1 cup cheddar", "cheese")


def test_word_matcher_requires_whole_words():
    assert word_matcher.matches("1/4 cup mixed nuts", "nut")
    assert word_matcher.matches("2 Eggs", "egg")
    assert not word_matcher.matches("1 tsp nutmeg", "nut")
    assert not word_matcher.matches("1 butternut squash", "butter")
    assert not word_matcher.matches("licorice", "rice")


def test_word_matcher_position():
    assert word_matcher.position("peanut butter", "peanut") == 0
    assert word_matcher.position("peanut butter", "butter") == 7
    assert word_matcher.position("peanut butter", "") is None
