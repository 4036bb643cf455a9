"""Settings tests — API key absence and defaults."""

from prenatal_api.config import Settings


def test_missing_key_means_fallback_mode(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.anthropic_api_key is None
    assert settings.llm_configured is False


def test_blank_key_counts_as_absent(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "   ")
    settings = Settings(_env_file=None)
    assert settings.anthropic_api_key is None


def test_key_from_environment(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
    settings = Settings(_env_file=None)
    assert settings.llm_configured is True


def test_token_budgets_default():
    settings = Settings(_env_file=None)
    assert settings.development_max_tokens == 1000
    assert settings.exercise_max_tokens == 1500
    assert settings.anthropic_model == "claude-sonnet-4-20250514"
