"""
Unit tests for text_normalization module.
"""

import pytest
from cvextract.core.text_normalization import (
    clean_fragment,
    contains_term,
    find_term,
    has_bullet,
    normalize_header_key,
    split_lines,
    split_on_dash,
    strip_bullet,
    title_case_each_word,
)


# ===== LINE RECORD =====

def test_split_lines_trims_collapses_and_drops_empty():
    """Whitespace runs collapse and empty lines disappear."""
    text = "  Jane   Doe \n\n\t jane@gmail.com\r\n   \n"
    assert split_lines(text) == ["Jane Doe", "jane@gmail.com"]


def test_split_lines_empty_text():
    assert split_lines("") == []


# ===== DASH SPLITTING =====

@pytest.mark.parametrize("line", [
    "GCE A/L - Royal College",
    "GCE A/L – Royal College",
    "GCE A/L — Royal College",
    "GCE A/L—Royal College",
    "GCE A/L–Royal College",
])
def test_split_on_dash_all_variants(line):
    """Hyphen, en dash and em dash all split the same way."""
    assert split_on_dash(line) == ("GCE A/L", "Royal College")


def test_split_on_dash_ignores_in_word_hyphen():
    assert split_on_dash("GCE A-Level") is None
    assert split_on_dash("Jean-Luc Picard") is None



def test_split_on_dash_hyphen_accepted_by_callback():
    """An unspaced hyphen splits only where the right side is accepted."""
    def is_school(s):
        return s.endswith("College")

    assert split_on_dash("GCE A/L-Royal College", hyphen_right=is_school) == ("GCE A/L", "Royal College")
    assert split_on_dash("GCE A-Level-Royal College", hyphen_right=is_school) == ("GCE A-Level", "Royal College")
    assert split_on_dash("GCE A-Level", hyphen_right=is_school) is None


def test_split_on_dash_needs_both_sides():
    assert split_on_dash("- Royal College") is None


# ===== SMALL HELPERS =====

def test_normalize_header_key():
    assert normalize_header_key("WORK EXPERIENCE:") == "work experience"
    assert normalize_header_key("• Skills •") == "skills"
    assert normalize_header_key("  Technical   Skills ") == "technical skills"


def test_bullets():
    assert has_bullet("• Built REST APIs")
    assert has_bullet("- item")
    assert not has_bullet("Built REST APIs")
    assert strip_bullet("•  Built REST APIs") == "Built REST APIs"


def test_clean_fragment_trims_separator_debris():
    assert clean_fragment(" BSc in IT ( ") == "BSc in IT"
    assert clean_fragment("- Colombo, ") == "Colombo"
    assert clean_fragment("Royal College ()") == "Royal College"


def test_title_case_each_word():
    assert title_case_each_word("problem solving") == "Problem Solving"
    assert title_case_each_word("TIME MANAGEMENT") == "Time Management"


# ===== KEYWORD MATCHING =====

def test_terms_are_word_bounded():
    """Short degree abbreviations never match inside longer words."""
    assert not contains_term("Management trainee", ("ma",))
    assert contains_term("MA in English", ("ma",))
    assert contains_term("(B.Sc.) Physics", ("b.sc",))


def test_find_term_prefers_longest():
    assert find_term("Higher National Diploma in IT", ("diploma", "higher national diploma")) == "Higher National Diploma"
    assert find_term("Nothing here", ("diploma",)) is None
