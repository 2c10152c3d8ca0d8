# tests/test_dates.py

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from gedcom_importer.dates import combine, parse_date, parse_time, parse_timestamp


def test_full_date():
    assert parse_date("11 JUN 2025") == date(2025, 6, 11)


def test_full_date_is_case_insensitive():
    assert parse_date("3 jan 1901") == date(1901, 1, 3)


def test_french_months():
    assert parse_date("14 JUIL 1789") == date(1789, 7, 14)
    assert parse_date("1 FEVR 1900") == date(1900, 2, 1)
    assert parse_date("AOUT 1914") == date(1914, 8, 1)


def test_unknown_month_maps_to_january():
    assert parse_date("5 XYZ 1900") == date(1900, 1, 5)


def test_iso_date():
    assert parse_date("2025-06-11") == date(2025, 6, 11)


def test_simple_year():
    assert parse_date("1990") == date(1990, 1, 1)


def test_month_year():
    assert parse_date("JUN 2025") == date(2025, 6, 1)


@pytest.mark.parametrize("qualifier", ["ABT", "EST", "CAL", "abt"])
def test_approximate_qualifier_is_dropped(qualifier):
    assert parse_date(f"{qualifier} 1850") == parse_date("1850")
    assert parse_date(f"{qualifier} 2 MAR 1850") == date(1850, 3, 2)


def test_impossible_calendar_date():
    assert parse_date("31 FEB 1900") is None


@pytest.mark.parametrize("text", ["BEF 1800", "AFT 1800"])
def test_range_qualifier_reads_as_unknown_month(text):
    # BEF / AFT match the month-year rule; unknown months map to January
    assert parse_date(text) == date(1800, 1, 1)


@pytest.mark.parametrize("text", [None, "", "   ", "FROM 1800 TO 1850", "BET 1800 AND 1850", "hello"])
def test_unrecognised_dates_are_none(text):
    assert parse_date(text) is None


def test_parse_time():
    assert parse_time("14:30") == time(14, 30)
    assert parse_time("14:30:15") == time(14, 30, 15)
    assert parse_time("2:30 PM") == time(14, 30)
    assert parse_time("12 PM") == time(12, 0)
    assert parse_time("9 am") == time(9, 0)


@pytest.mark.parametrize("text", [None, "", "not a time", "25:99", "12", "1430", "3 MAR 2020"])
def test_parse_time_failures(text):
    assert parse_time(text) is None


def test_combine_defaults_to_midnight():
    assert combine(date(2020, 3, 3), None) == datetime(2020, 3, 3, 0, 0, 0)
    assert combine(None, time(1, 2)) is None


def test_parse_timestamp():
    assert parse_timestamp("3 MAR 2020", "10:20:30") == datetime(2020, 3, 3, 10, 20, 30)
    assert parse_timestamp("3 MAR 2020", "garbage") == datetime(2020, 3, 3)
    assert parse_timestamp("3 MAR 2020", "12") == datetime(2020, 3, 3)
    assert parse_timestamp(None, "10:00") is None
