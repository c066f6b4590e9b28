"""AI-powered resume scorer."""

from pathlib import Path

from resume_screener.logging.logger import Log
from resume_screener.scoring.client_base import BaseScoringClient
from resume_screener.scoring.interpreter import interpret
from resume_screener.scoring.models import AnalysisResult
from resume_screener.scoring.prompt_loader import build_prompt, load_prompt_template

MISSING_KEY_RESULT = AnalysisResult(
    score=0,
    strengths="API key not configured.",
    weaknesses=(
        "Cannot evaluate resume without an API key. "
        "Please check server configuration."
    ),
)

MAX_TEMPERATURE = 0.5


def degraded_result(exc: Exception) -> AnalysisResult:
    """Build the placeholder verdict returned when evaluation itself failed."""
    return AnalysisResult(
        score=0,
        strengths="An error occurred during evaluation.",
        weaknesses=(
            f"Evaluation failed due to an internal error: {exc}. "
            "Please ensure your API key is valid and the model is accessible."
        ),
    )


class ResumeScorer:
    """Scores resume text against a job description using an AI provider.

    ``score`` never raises: a missing client or any provider failure yields a
    degraded AnalysisResult so one outage cannot fail a whole batch.
    """

    def __init__(
        self,
        *,
        client: BaseScoringClient | None,
        model: str,
        temperature: float = 0.2,
        max_output_tokens: int = 500,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(MAX_TEMPERATURE, temperature))
        self._max_output_tokens = max_output_tokens
        self._prompt_template = load_prompt_template(prompt_template_path)

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def score(self, resume_text: str, job_description: str) -> AnalysisResult:
        """Return the verdict for one resume."""
        if self._client is None:
            Log.error("AI provider API key is not set; resume was not evaluated")
            return MISSING_KEY_RESULT

        prompt = build_prompt(
            self._prompt_template,
            resume_text=resume_text,
            job_description=job_description,
        )
        try:
            raw_response = self._client.generate(
                model=self._model,
                prompt=prompt,
                max_output_tokens=self._max_output_tokens,
                temperature=self._temperature,
            )
            Log.debug(f"AI raw response:\n{raw_response}")
            result = interpret(raw_response)
        except Exception as exc:
            Log.error(f"AI call or response processing failed: {exc}")
            return degraded_result(exc)

        Log.info("Resume scored", score=result.score, model=self._model)
        return result
