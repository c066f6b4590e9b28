import httpx
import openai

from resume_screener.scoring.client_base import BaseScoringClient
from resume_screener.scoring.exceptions import ScoringError, ScoringNetworkError


class OpenAIClientAdapter(BaseScoringClient):
    """Scoring client built on the OpenAI-compatible chat completions API.

    Groq, OpenRouter, Together, DeepSeek and Ollama all expose this API, so the
    same adapter serves every hosted provider through ``base_url``.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_retries: int = 1,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=max_retries,
        )

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_output_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ScoringNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ScoringNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ScoringError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise ScoringError("AI returned empty response")
        return content.strip()
