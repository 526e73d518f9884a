from quizgen.generation.response_parser import (
    extract_candidates,
    parse_brace_span,
    parse_fenced_block,
    parse_model_output,
)

EMBEDDED = '{"questions":[{"question":"Q","options":["a","b","c","d"],"correctIndex":1}]}'


def test_direct_json_is_returned() -> None:
    assert parse_model_output('{"questions":[]}') == {"questions": []}


def test_fenced_json_block_is_parsed() -> None:
    text = "```json " + EMBEDDED + "```"

    payload = parse_model_output(text)

    assert payload["questions"][0]["question"] == "Q"
    assert payload["questions"][0]["correctIndex"] == 1


def test_fenced_block_with_prose_and_uppercase_tag() -> None:
    text = "Here you go:\n```JSON\n" + EMBEDDED + "\n```\nLet me know if you need more."

    assert parse_fenced_block(text) == parse_model_output(EMBEDDED)


def test_embedded_object_is_extracted_from_prose() -> None:
    text = "Sure! " + EMBEDDED + " Thanks"

    payload = parse_model_output(text)

    assert payload["questions"] == [{"question": "Q", "options": ["a", "b", "c", "d"], "correctIndex": 1}]


def test_garbage_returns_empty_sentinel() -> None:
    assert parse_model_output("no json here") == {"questions": []}


def test_empty_and_none_output_return_empty_sentinel() -> None:
    assert parse_model_output("") == {"questions": []}
    assert parse_model_output(None) == {"questions": []}  # type: ignore[arg-type]


def test_non_object_json_falls_through_to_sentinel() -> None:
    assert parse_model_output("[1, 2, 3]") == {"questions": []}


def test_unbalanced_braces_do_not_raise() -> None:
    assert parse_brace_span("} oops {") is None
    assert parse_model_output('{"questions": [') == {"questions": []}


def test_extract_candidates_requires_a_list() -> None:
    assert extract_candidates({"questions": [{"question": "Q"}]}) == [{"question": "Q"}]
    assert extract_candidates({"questions": "nope"}) == []
    assert extract_candidates({"items": []}) == []
