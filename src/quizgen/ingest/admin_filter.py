"""Heuristics that strip administrative and boilerplate text from course documents.

The filter works on lines and runs three passes in a fixed order: table of
contents lines, lines matching :data:`ADMIN_LINE_PATTERNS`, and short lines
repeated often enough to be page headers or footers. It reduces the noise that
reaches the model but does not guarantee its removal; generated questions are
screened again in :mod:`quizgen.generation.postprocess`.
"""
from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List, NamedTuple

REPEATED_LINE_MAX_CHARS = 80
REPEATED_LINE_MAX_OCCURRENCES = 10

# A heading of up to 80 characters that contains no dot leader, two or more
# dots, then a 1-4 digit page number. A line is a table of contents line only
# when it consists entirely of such entries.
_TOC_ENTRY = r"(?:(?!\.{2,}[ \t]*\d)[^\n]){0,80}?\.{2,}[ \t]*\d{1,4}(?!\d)"
_TOC_LINE_RE = re.compile(rf"(?:[ \t]*{_TOC_ENTRY})+[ \t]*")


class AdminPattern(NamedTuple):
    pattern: re.Pattern[str]
    rationale: str


def _p(expression: str, rationale: str) -> AdminPattern:
    return AdminPattern(re.compile(expression, re.IGNORECASE), rationale)


ADMIN_LINE_PATTERNS: tuple[AdminPattern, ...] = (
    _p(r"\b(?:credit|ce|cpe|ceu|contact)\s+hours?\b", "credit hour notices"),
    _p(r"\b(?:cpe|ce|ceu)\s+credits?\b", "continuing education credits"),
    _p(r"\bcontinuing\s+(?:professional\s+)?education\b", "continuing education notices"),
    _p(r"\bcourse\s+(?:id|number|code|no\.?|#)", "course identifiers"),
    _p(r"\b(?:course|program|education)\s+(?:provider|sponsor)s?\b", "provider and sponsor mentions"),
    _p(r"\bsponsor(?:ed\s+by|ship)\b", "sponsorship notices"),
    _p(r"\bnasba\b", "registry approvals"),
    _p(r"\bapproved\s+(?:by|for|provider|sponsor)\b", "approval statements"),
    _p(r"\bapproval\s+(?:number|no\.?|#|code)", "approval numbers"),
    _p(r"^\s*(?:table\s+of\s+contents|contents|index)\s*:?\s*$", "table of contents headings"),
    _p(r"\btable\s+of\s+contents\b", "table of contents mentions"),
    _p(r"\babout\s+the\s+authors?\b", "author biographies"),
    _p(r"\backnowledge?ments?\b", "acknowledgments"),
    _p(r"\b(?:written|authored|prepared)\s+by\b", "authorship credits"),
    _p(r"\bversion\s*[:#]?\s*v?\d+(?:\.\d+)*\b", "version numbers"),
    _p(r"\b\d+(?:st|nd|rd|th)\s+edition\b|\bedition\s*[:#]?\s*\d", "edition statements"),
    _p(r"\b(?:revised|revision\s+date|last\s+updated|publication\s+date)\b", "revision dates"),
    _p(r"\bcontact\s+(?:us|information|info)\b", "contact details"),
    _p(r"\b(?:customer|technical)\s+(?:service|support)\b", "support desks"),
    _p(r"\b(?:to\s+order|ordering\s+information|order\s+online)\b", "ordering information"),
    _p(r"\btoll[- ]?free\b", "phone contact lines"),
    _p(r"[\w.+-]+@[\w-]+\.[\w.-]+", "email addresses"),
    _p(r"\(?\b\d{3}\)?[-.\s]\d{3}[-.]\d{4}\b", "phone numbers"),
    _p(r"\bcopyright\b|©|\(c\)\s*\d{4}", "copyright notices"),
    _p(r"\ball\s+rights\s+reserved\b", "rights statements"),
    _p(r"\bdisclaimer\b", "disclaimers"),
    _p(r"\bpage\s+\d+\s+of\s+\d+\b", "page N of M footers"),
)


def strip_toc_entries(text: str) -> str:
    """Drop lines made up only of "heading ........ 12" entries; other lines are kept verbatim."""

    return "\n".join(line for line in text.splitlines() if not is_toc_line(line))


def is_toc_line(line: str) -> bool:
    return bool(line.strip()) and _TOC_LINE_RE.fullmatch(line) is not None


def is_admin_line(line: str, patterns: Iterable[AdminPattern] = ADMIN_LINE_PATTERNS) -> bool:
    return any(entry.pattern.search(line) for entry in patterns)


def strip_admin_lines(text: str, patterns: Iterable[AdminPattern] = ADMIN_LINE_PATTERNS) -> str:
    """Drop every line matching one of the administrative patterns."""

    patterns = tuple(patterns)
    return "\n".join(line for line in text.splitlines() if not is_admin_line(line, patterns))


def drop_repeated_lines(
    text: str,
    max_chars: int = REPEATED_LINE_MAX_CHARS,
    max_occurrences: int = REPEATED_LINE_MAX_OCCURRENCES,
) -> str:
    """Keep at most ``max_occurrences`` copies of short lines that repeat."""

    seen: Counter[str] = Counter()
    kept: List[str] = []
    for line in text.splitlines():
        key = line.strip().lower()
        if key and len(key) <= max_chars:
            seen[key] += 1
            if seen[key] > max_occurrences:
                continue
        kept.append(line)
    return "\n".join(kept)


def clean_text(text: str) -> str:
    """Apply all administrative filters in order and return the cleaned text."""

    cleaned = strip_toc_entries(text)
    cleaned = strip_admin_lines(cleaned)
    cleaned = drop_repeated_lines(cleaned)
    return cleaned.strip()


__all__ = [
    "ADMIN_LINE_PATTERNS",
    "AdminPattern",
    "clean_text",
    "drop_repeated_lines",
    "is_admin_line",
    "is_toc_line",
    "strip_admin_lines",
    "strip_toc_entries",
]
