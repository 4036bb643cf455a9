"""Prompts — instruction strings sent to the model for each endpoint.

Invariants:
    - Every prompt demands a bare JSON object with the exact response schema
    - Every prompt names the target language; unknown codes get English,
      the same default the fallback tables use
    - Pure string formatting, no IO

Design Decisions:
    - Three label tables instead of one: the directive line names the script for
      Hindi ("Devanagari script"), the per-field hints use the plain name
"""

from typing import Any

from prenatal_api.core.domain_types import Language, format_count, resolve_language

# --- Language labels ---------------------------------------------------------

_RESPONSE_LANGUAGE: dict[Language, str] = {
    Language.EN: "English",
    Language.HI: "Hindi (Devanagari script)",
    Language.AR: "Arabic",
    Language.UR: "Urdu",
}

_LANGUAGE_NAME: dict[Language, str] = {
    Language.EN: "English",
    Language.HI: "Hindi",
    Language.AR: "Arabic",
    Language.UR: "Urdu",
}

_ALL_TEXT_LANGUAGE: dict[Language, str] = {
    Language.EN: "English",
    Language.HI: "Hindi (Devanagari)",
    Language.AR: "Arabic",
    Language.UR: "Urdu",
}


# --- Templates ---------------------------------------------------------------

_DEVELOPMENT_TEMPLATE = """You are a prenatal development expert. Provide detailed information about fetal development at {weeks} weeks and {days} days of pregnancy.

IMPORTANT: Respond in {response_language} language.

Please respond ONLY with a JSON object (no markdown, no backticks, no preamble) with this exact structure:
{{
  "icon": "single emoji representing the baby at this stage",
  "length": "length in cm or mm as string with unit in {name}",
  "weight": "weight in grams as string with unit in {name}",
  "comparison": "comparison to a fruit/vegetable with emoji and text in {name}",
  "title": "Week X: Brief descriptive title in {name}",
  "description": "2-3 sentence description in {name}",
  "developments": ["development 1", "development 2", "development 3", "development 4"]
}}

Be medically accurate and supportive in tone. All text must be in {all_text}."""

_EXERCISE_TEMPLATE = """You are a prenatal fitness expert. Provide safe exercise recommendations for a pregnant woman at {weeks} weeks and {days} days of pregnancy.

IMPORTANT: Respond in {response_language} language.

Please respond ONLY with a JSON object (no markdown, no backticks, no preamble) with this exact structure:
{{
  "intro": "Brief introduction about exercise at this stage in {name} (2-3 sentences)",
  "exercises": [
    {{
      "name": "Exercise name",
      "emoji": "relevant emoji",
      "description": "How to do it",
      "benefits": "Benefits"
    }}
  ]
}}

Provide 4-5 safe exercises appropriate for {weeks} weeks of pregnancy. Consider trimester-specific needs."""


def _render(template: str, weeks: Any, days: Any, language: Any) -> str:
    lang = resolve_language(language)
    return template.format(
        weeks=format_count(weeks),
        days=format_count(days),
        response_language=_RESPONSE_LANGUAGE[lang],
        name=_LANGUAGE_NAME[lang],
        all_text=_ALL_TEXT_LANGUAGE[lang],
    )


def build_development_prompt(weeks: Any, days: Any, language: Any) -> str:
    """Prompt for fetal development facts at (weeks, days)."""
    return _render(_DEVELOPMENT_TEMPLATE, weeks, days, language)


def build_exercise_prompt(weeks: Any, days: Any, language: Any) -> str:
    """Prompt for 4-5 safe exercises at (weeks, days)."""
    return _render(_EXERCISE_TEMPLATE, weeks, days, language)
