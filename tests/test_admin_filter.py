import re

import pytest

from quizgen.ingest.admin_filter import (
    ADMIN_LINE_PATTERNS,
    clean_text,
    drop_repeated_lines,
    is_admin_line,
    is_toc_line,
    strip_toc_entries,
)

INSTRUCTIONAL_LINES = [
    "Depreciation allocates the cost of an asset over its useful life.",
    "The balance sheet lists assets, liabilities and equity at a point in time.",
    "Photosynthesis converts light energy into chemical energy.",
    "Revenue is recognized when control of goods transfers to the customer.",
]


def test_copyright_line_is_removed() -> None:
    text = "\n".join([INSTRUCTIONAL_LINES[0], "Copyright © 2020 Acme Corp", INSTRUCTIONAL_LINES[1]])

    cleaned = clean_text(text)

    assert "Acme" not in cleaned
    assert cleaned.splitlines() == INSTRUCTIONAL_LINES[:2]


def test_toc_line_is_removed() -> None:
    text = "\n".join(["Introduction ....... 3", INSTRUCTIONAL_LINES[2]])

    assert clean_text(text) == INSTRUCTIONAL_LINES[2]


def test_toc_runs_on_a_single_line_are_removed() -> None:
    text = "Introduction ..... 3 Chapter One: Ledgers ........ 12 Chapter Two ... 140"

    assert strip_toc_entries(text) == ""


def test_toc_stripping_keeps_other_lines() -> None:
    text = "\n".join(["Overview .... 1", "", INSTRUCTIONAL_LINES[0]])

    assert strip_toc_entries(text) == "\n" + INSTRUCTIONAL_LINES[0]


def test_repeated_line_is_kept_at_most_ten_times() -> None:
    lines = []
    for index in range(15):
        lines.append("ACME Training Series")
        lines.append(f"Point {index} explains how ledgers are balanced.")

    cleaned = clean_text("\n".join(lines))

    assert cleaned.splitlines().count("ACME Training Series") == 10
    assert sum(1 for line in cleaned.splitlines() if line.startswith("Point ")) == 15


def test_repeated_lines_compare_case_insensitively() -> None:
    lines = ["Module Notes" if index % 2 else "MODULE NOTES" for index in range(12)]

    kept = drop_repeated_lines("\n".join(lines)).splitlines()

    assert len(kept) == 10


def test_long_repeated_lines_are_kept() -> None:
    long_line = "A" * 81
    kept = drop_repeated_lines("\n".join([long_line] * 12)).splitlines()

    assert len(kept) == 12


def test_instructional_text_is_preserved_verbatim() -> None:
    text = "\n".join(INSTRUCTIONAL_LINES)

    assert clean_text(text) == text


@pytest.mark.parametrize(
    "line",
    (
        "This course qualifies for 4 CPE credits",
        "Credit hours: 3",
        "Recommended CE hours: 2.5",
        "Course ID: ACC-101",
        "NASBA Sponsor #12345",
        "Approved by the State Board of Accountancy",
        "Table of Contents",
        "INDEX",
        "About the Author",
        "Acknowledgments",
        "Version 2.3",
        "3rd Edition",
        "Revised January 2021",
        "Contact us at 1-800-555-1234",
        "For customer support, email help@example.com",
        "Copyright © 2020 Acme Corp",
        "All rights reserved.",
        "Disclaimer: this material is informational only",
        "Page 3 of 120",
    ),
)
def test_administrative_lines_are_detected(line: str) -> None:
    assert is_admin_line(line)
    assert clean_text(f"{line}\n{INSTRUCTIONAL_LINES[0]}") == INSTRUCTIONAL_LINES[0]


def test_pattern_table_is_case_insensitive_and_documented() -> None:
    assert ADMIN_LINE_PATTERNS
    for entry in ADMIN_LINE_PATTERNS:
        assert entry.pattern.flags & re.IGNORECASE
        assert entry.rationale.strip()


@pytest.mark.parametrize(
    "line",
    (
        "Fibonacci numbers grow quickly: 1, 1, 2, 3, 5, 8... 13 comes next in the sequence.",
        "A" * 100 + " and so on... 12 more steps remain in the procedure.",
        "Multiply by 10.. 20 times to see the effect.",
    ),
)
def test_ellipsis_followed_by_number_is_kept_verbatim(line: str) -> None:
    assert not is_toc_line(line)
    assert clean_text(line) == line


def test_toc_entry_followed_by_prose_keeps_the_line() -> None:
    line = "Introduction ....... 3 explains what the later chapters build on."

    assert strip_toc_entries(line) == line
