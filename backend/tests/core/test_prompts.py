"""Prompt tests — schema, language directive, and gestation interpolation.

Tests cover:
    - Both prompts name the requested language
    - Unknown codes get the English directive (same default as fallback tables)
    - weeks/days interpolated; the JSON schema braces survive formatting
"""

import pytest

from prenatal_api.core.prompts import (
    build_development_prompt,
    build_exercise_prompt,
)


@pytest.mark.parametrize("code, label", [
    ("en", "English"),
    ("hi", "Hindi (Devanagari script)"),
    ("ar", "Arabic"),
    ("ur", "Urdu"),
])
def test_language_directive(code, label):
    for build in (build_development_prompt, build_exercise_prompt):
        prompt = build(20, 3, code)
        assert f"IMPORTANT: Respond in {label} language." in prompt


def test_unknown_language_defaults_to_english():
    prompt = build_development_prompt(20, 3, "fr")
    assert "Respond in English language." in prompt
    assert "Urdu" not in prompt


def test_development_prompt_interpolates_gestation():
    prompt = build_development_prompt(20, 3, "en")
    assert "at 20 weeks and 3 days of pregnancy" in prompt


def test_development_prompt_lists_every_field():
    prompt = build_development_prompt(12, 0, "hi")
    for field in (
        '"icon"', '"length"', '"weight"', '"comparison"',
        '"title"', '"description"', '"developments"',
    ):
        assert field in prompt
    assert "unit in Hindi" in prompt
    assert "All text must be in Hindi (Devanagari)." in prompt
    assert "{{" not in prompt


def test_exercise_prompt_schema_and_count():
    prompt = build_exercise_prompt(30, 2, "ar")
    for field in ('"intro"', '"exercises"', '"name"', '"emoji"', '"benefits"'):
        assert field in prompt
    assert "Provide 4-5 safe exercises appropriate for 30 weeks of pregnancy." in prompt
    assert "in Arabic (2-3 sentences)" in prompt


def test_missing_days_rendered_as_zero():
    prompt = build_exercise_prompt(8, None, "en")
    assert "at 8 weeks and 0 days" in prompt


def test_prompts_are_deterministic():
    assert build_development_prompt(5, 1, "ur") == build_development_prompt(5, 1, "ur")
