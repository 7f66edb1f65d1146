"""
Tests for section segmentation.

Headers must be whole lines (or "Header: content"); prose that mentions a
section keyword never opens a section.
"""

from cvextract.core.section_segmenter import (
    SectionKind,
    TRANSITIONS,
    first_section,
    header_kind,
    lines_of,
    segment,
)


LINES = [
    "Jane Doe",
    "Skills: Python, SQL",
    "EDUCATION",
    "BSc in Computer Science",
    "University of Colombo",
    "Work Experience:",
    "Developer at Acme (2020 - Present)",
    "References",
    "Available on request",
]


# ===== HEADER DETECTION =====

def test_header_kind_whole_line_only():
    """Header keywords are matched against the whole normalized line."""
    assert header_kind("EDUCATION") is SectionKind.EDUCATION
    assert header_kind("  Work Experience: ") is SectionKind.WORK
    assert header_kind("Technical Skills") is SectionKind.SKILLS
    assert header_kind("Personal Details") is SectionKind.PERSONAL
    assert header_kind("References") is SectionKind.OTHER


def test_prose_is_not_a_header():
    assert header_kind("I have experience with Python") is None
    assert header_kind("Strong education in mathematics") is None
    assert header_kind("Email: jane@gmail.com") is None


def test_inline_header():
    assert header_kind("Skills: Python, SQL") is SectionKind.SKILLS


def test_inline_label_of_terminator_kind_stays_content():
    """'Languages: ...' inside a skills list does not close the section."""
    lines = ["Skills", "Languages: Python, Java", "Tools: Git"]
    sections = segment(lines)
    assert [s.kind for s in sections] == [SectionKind.SKILLS]
    assert lines_of(lines, sections, SectionKind.SKILLS) == lines[1:]
    assert header_kind("Languages") is SectionKind.OTHER


def test_transition_table_covers_every_state():
    for kind in SectionKind:
        assert TRANSITIONS[(kind, "header")] == "open"
        assert TRANSITIONS[(kind, "content")] == "extend"
    assert TRANSITIONS[(SectionKind.OTHER, "inline")] == "open"
    assert TRANSITIONS[(SectionKind.PERSONAL, "inline")] == "open"
    assert TRANSITIONS[(SectionKind.WORK, "inline")] == "extend"
    assert TRANSITIONS[(SectionKind.EDUCATION, "inline")] == "extend"


def test_inline_label_inside_work_section_stays_content():
    """'Technologies used: ...' in a project entry does not open a skills section."""
    lines = [
        "Projects",
        "Chat App Jan 2020 - Mar 2020",
        "Technologies used: Python, Django",
        "Shop App Jan 2021 - Mar 2022",
        "Skills",
        "JavaScript, React",
    ]
    sections = segment(lines)
    assert [s.kind for s in sections] == [SectionKind.WORK, SectionKind.SKILLS]
    assert lines_of(lines, sections, SectionKind.WORK) == lines[1:4]
    assert lines_of(lines, sections, SectionKind.SKILLS) == ["JavaScript, React"]


def test_header_kind_whole_line_mode():
    assert header_kind("Skills: Python, SQL", inline=False) is None
    assert header_kind("Skills", inline=False) is SectionKind.SKILLS


# ===== SEGMENTATION =====

def test_segment_kinds_in_order():
    sections = segment(LINES)
    assert [s.kind for s in sections] == [
        SectionKind.OTHER,
        SectionKind.SKILLS,
        SectionKind.EDUCATION,
        SectionKind.WORK,
        SectionKind.OTHER,
    ]


def test_segment_ranges_exclude_header_lines():
    sections = segment(LINES)
    education = first_section(sections, SectionKind.EDUCATION)
    assert (education.start, education.end) == (3, 5)
    work = first_section(sections, SectionKind.WORK)
    assert (work.start, work.end) == (6, 7)


def test_sections_do_not_overlap():
    sections = segment(LINES)
    for a, b in zip(sections, sections[1:]):
        assert a.end <= b.start


def test_inline_content_belongs_to_section():
    sections = segment(LINES)
    assert lines_of(LINES, sections, SectionKind.SKILLS) == ["Python, SQL"]
    assert lines_of(LINES, sections, SectionKind.EDUCATION) == ["BSc in Computer Science", "University of Colombo"]


def test_empty_header_without_content_is_dropped():
    sections = segment(["Education", "Skills", "Python"])
    assert [s.kind for s in sections] == [SectionKind.SKILLS]


def test_project_header_flag():
    sections = segment(["Projects", "Chat App | React  Jan 2023 - Mar 2023"])
    assert sections[0].kind is SectionKind.WORK
    assert sections[0].is_project
    assert not segment(["Work Experience", "x"])[0].is_project


def test_no_headers_single_other_section():
    sections = segment(["Jane Doe", "Senior Developer at Acme (2020 - Present)"])
    assert len(sections) == 1
    assert sections[0].kind is SectionKind.OTHER
    assert (sections[0].start, sections[0].end) == (0, 2)
