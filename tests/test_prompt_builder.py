import pytest

from quizgen.generation.prompt_builder import build_prompt


def test_build_prompt_embeds_count_and_content() -> None:
    prompt = build_prompt("  Depreciation spreads an asset's cost over its useful life.  ", 4)

    assert "generate 4 multiple-choice questions" in prompt
    assert prompt.endswith('"""Depreciation spreads an asset\'s cost over its useful life."""')


def test_build_prompt_keeps_schema_braces() -> None:
    prompt = build_prompt("Content.", 1)

    assert '{"questions":[]}' in prompt
    assert '"correctIndex":0' in prompt


def test_build_prompt_lists_excluded_topics() -> None:
    prompt = build_prompt("Content.", 2).lower()

    for topic in ("credit hours", "copyright", "contact", "accreditation"):
        assert topic in prompt


@pytest.mark.parametrize("count", (0, -1))
def test_build_prompt_rejects_non_positive_count(count: int) -> None:
    with pytest.raises(ValueError):
        build_prompt("Content.", count)


def test_build_prompt_rejects_missing_text() -> None:
    with pytest.raises(ValueError):
        build_prompt(None, 3)  # type: ignore[arg-type]
