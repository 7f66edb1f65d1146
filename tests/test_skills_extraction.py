"""Tests for restricted-vocabulary skills extraction."""

from cvextract.core.section_segmenter import segment
from cvextract.core.skills_matcher import display_form, match_skills, tokenize


def _skills(text, **kwargs):
    lines = [l.strip() for l in text.splitlines() if l.strip()]
    return match_skills(lines, segment(lines), **kwargs)


def test_skills_scoped_to_skills_section():
    """A language mentioned only in a work description is not a skill."""
    text = """Jane Doe
Skills
JavaScript, React
Work Experience
Developer at Acme (2020 - Present)
Built data pipelines in Python
"""
    assert _skills(text) == ["JavaScript", "React"]


def test_inline_skills_header():
    assert _skills("Jane Doe\nSkills: Python, FastAPI, SQL") == ["Python", "SQL", "FastAPI"]


def test_bulleted_skills_section():
    text = """Technical Skills
• Python
• Docker
• Kubernetes
Education
BSc in Computer Science
"""
    assert _skills(text) == ["Python", "Docker", "Kubernetes"]


def test_no_skills_section_means_no_skills():
    assert _skills("Jane Doe\nI write Python and Java every day") == []


def test_java_is_not_found_inside_javascript():
    assert _skills("Skills: JavaScript, TypeScript") == ["JavaScript", "TypeScript"]


def test_symbols_inside_names():
    assert _skills("Skills: C++, C#, Node.js, .NET") == ["C++", "C#", "Node.js", ".NET"]


def test_case_insensitive_with_curated_display_form():
    assert _skills("Skills: javascript, POSTGRESQL, node.js") == ["JavaScript", "Node.js", "PostgreSQL"]


def test_soft_skills_title_cased():
    assert _skills("Skills\nLeadership; problem solving | teamwork") == ["Leadership", "Teamwork", "Problem Solving"]


def test_duplicates_removed():
    assert _skills("Skills\nPython\nPython, python") == ["Python"]


def test_labelled_skill_groups():
    text = """Skills
Languages: Python, Java
Tools: Git, Docker
"""
    assert _skills(text) == ["Python", "Java", "Docker", "Git"]


def test_custom_vocabulary():
    assert _skills("Skills: Cobol, Python", vocabulary=("COBOL",)) == ["COBOL"]


def test_tokenize_drops_labels():
    assert tokenize("Languages: Python, C++ | React") == ["Python", "C++", "React"]


def test_display_form():
    assert display_form("JavaScript") == "JavaScript"
    assert display_form("problem solving") == "Problem Solving"
