import csv
import io

from quizgen.export import CSV_HEADER, export_filename, questions_to_csv
from quizgen.generation.models import Question


def _question(text: str, options, correct_index: int) -> Question:
    return Question(question=text, options=list(options), correct_index=correct_index)


def test_csv_has_header_and_one_row_per_question() -> None:
    questions = [
        _question("What is revenue?", ["Income", "Debt", "Cash", "Equity"], 0),
        _question('Which "ratio" measures liquidity?', ["Current", "Debt", "Margin", "Turnover"], 0),
    ]

    content = questions_to_csv(questions, "Finance")

    rows = list(csv.reader(io.StringIO(content)))
    assert tuple(rows[0]) == CSV_HEADER
    assert rows[1] == [
        "",
        "What is revenue?",
        "Finance",
        "single-choice",
        "What is revenue?",
        "publish",
        "1",
        "Income|Debt|Cash|Equity",
        "Income",
    ]
    assert rows[2][1] == 'Which "ratio" measures liquidity?'
    assert not content.endswith("\r\n")


def test_every_field_is_quoted() -> None:
    content = questions_to_csv([_question("Q?", ["a", "b", "c", "d"], 3)])

    header, row = content.split("\r\n")
    assert header == ",".join(f'"{name}"' for name in CSV_HEADER)
    assert row == '"","Q?","","single-choice","Q?","publish","1","a|b|c|d","d"'


def test_empty_question_list_yields_header_only() -> None:
    assert questions_to_csv([]) == ",".join(f'"{name}"' for name in CSV_HEADER)


def test_export_filename_sanitizes_category() -> None:
    assert export_filename("") == "questions.csv"
    assert export_filename("Tax 2024/Q1") == "questions-Tax_2024_Q1.csv"
    assert export_filename("ethics-101") == "questions-ethics-101.csv"
