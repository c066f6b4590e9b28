from typing import ClassVar

from resume_screener.config.settings import Settings
from resume_screener.scoring.client_base import BaseScoringClient
from resume_screener.scoring.example_client_adapter import ExampleClientAdapter
from resume_screener.scoring.openai_client_adapter import OpenAIClientAdapter
from resume_screener.scoring.scorer import ResumeScorer


class ScoringClientFactory:
    """Creates the resume scorer for the configured AI provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "groq": "https://api.groq.com/openai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> ResumeScorer:
        """Build a scorer; it has no client when the provider key is missing."""
        return ResumeScorer(
            client=cls.create_client(settings),
            model=settings.oracle_model_name,
            temperature=settings.oracle_temperature,
            max_output_tokens=settings.oracle_max_output_tokens,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseScoringClient | None:
        provider = settings.oracle_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            return None
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.oracle_timeout_seconds,
            base_url=base_url,
            max_retries=settings.oracle_max_retries,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.oracle_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "oracle_openai_compatible_base_url is required for "
                    "oracle_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown oracle provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.openai_api_key,
            "openai_compatible": settings.oracle_openai_compatible_api_key,
            "groq": settings.groq_api_key,
            "openrouter": settings.openrouter_api_key,
            "together": settings.together_api_key,
            "deepseek": settings.deepseek_api_key,
            "ollama": settings.ollama_api_key,
        }
        return key_map.get(provider, "").strip()
