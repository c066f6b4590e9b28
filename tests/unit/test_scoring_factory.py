from unittest.mock import patch

import pytest

from resume_screener.config.settings import Settings
from resume_screener.scoring.example_client_adapter import ExampleClientAdapter
from resume_screener.scoring.factory import ScoringClientFactory
from resume_screener.scoring.openai_client_adapter import OpenAIClientAdapter


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "oracle_provider": "groq",
        "groq_api_key": "",
        "openai_api_key": "",
    }
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


class TestCreateClient:
    def test_example_provider(self) -> None:
        client = ScoringClientFactory.create_client(_settings(oracle_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_missing_key_yields_no_client(self) -> None:
        assert ScoringClientFactory.create_client(_settings()) is None

    def test_groq_uses_groq_base_url(self) -> None:
        with patch("resume_screener.scoring.factory.OpenAIClientAdapter") as mock_cls:
            ScoringClientFactory.create_client(
                _settings(groq_api_key="gsk", oracle_timeout_seconds=9)
            )
        kwargs = mock_cls.call_args.kwargs
        assert kwargs["api_key"] == "gsk"
        assert kwargs["base_url"] == "https://api.groq.com/openai/v1"
        assert kwargs["timeout_seconds"] == 9

    def test_openai_uses_default_base_url(self) -> None:
        with patch("resume_screener.scoring.factory.OpenAIClientAdapter") as mock_cls:
            ScoringClientFactory.create_client(
                _settings(oracle_provider="OpenAI", openai_api_key="sk")
            )
        assert mock_cls.call_args.kwargs["base_url"] is None

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="base_url is required"):
            ScoringClientFactory.create_client(
                _settings(
                    oracle_provider="openai_compatible",
                    oracle_openai_compatible_api_key="k",
                )
            )

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown oracle provider"):
            ScoringClientFactory.create_client(_settings(oracle_provider="nope"))

    def test_builds_real_adapter(self) -> None:
        client = ScoringClientFactory.create_client(_settings(groq_api_key="gsk"))
        assert isinstance(client, OpenAIClientAdapter)


class TestCreateScorer:
    def test_scorer_without_key_is_not_configured(self) -> None:
        scorer = ScoringClientFactory.create(_settings())
        assert scorer.is_configured is False

    def test_scorer_with_example_provider_scores(self) -> None:
        scorer = ScoringClientFactory.create(_settings(oracle_provider="example"))
        assert scorer.score("resume", "job").score == 50
