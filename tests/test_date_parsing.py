"""
Tests for date-token and date-range parsing.
"""

from datetime import date

from cvextract.core.date_parsing import extract_year, find_dates, parse_date_range

TODAY = date(2026, 10, 17)


def test_month_name_range():
    rng = parse_date_range("September 2023 – June 2024", TODAY)
    assert rng.start_iso == "2023-09-01"
    assert rng.end_iso == "2024-06-01"
    assert rng.explicit_range
    assert not rng.open_ended


def test_abbreviated_months_with_to():
    rng = parse_date_range("Jan 2019 to Mar 2021", TODAY)
    assert rng.start_iso == "2019-01-01"
    assert rng.end_iso == "2021-03-01"
    assert rng.explicit_range


def test_numeric_month_range():
    rng = parse_date_range("06/2021 - 08/2022", TODAY)
    assert rng.start_iso == "2021-06-01"
    assert rng.end_iso == "2022-08-01"


def test_year_only_dates_use_january_first():
    rng = parse_date_range("2016 - 2020", TODAY)
    assert rng.start_iso == "2016-01-01"
    assert rng.end_iso == "2020-01-01"


def test_open_ended_range_resolves_to_today():
    rng = parse_date_range("2020 - Present", TODAY)
    assert rng.start_iso == "2020-01-01"
    assert rng.end == TODAY
    assert rng.open_ended
    assert rng.explicit_range


def test_currently_is_open_ended():
    rng = parse_date_range("March 2022 - Currently", TODAY)
    assert rng.start_iso == "2022-03-01"
    assert rng.end == TODAY


def test_single_date_has_no_end():
    rng = parse_date_range("Graduated 2019", TODAY)
    assert rng.start_iso == "2019-01-01"
    assert rng.end is None
    assert not rng.explicit_range


def test_no_dates():
    rng = parse_date_range("Team player", TODAY)
    assert rng.start is None
    assert rng.start_iso == ""
    assert rng.end_iso == ""


def test_find_dates_marks_month_precision():
    mentions = find_dates("June 2021 - 2025")
    assert [m.value for m in mentions] == [date(2021, 6, 1), date(2025, 1, 1)]
    assert [m.has_month for m in mentions] == [True, False]


def test_extract_year_prefers_range_end():
    assert extract_year("2016 - 2020") == "2020"
    assert extract_year("(Sept 2019 – July 2023)") == "2023"
    assert extract_year("Completed in 2018") == "2018"
    assert extract_year("no dates here") == ""
