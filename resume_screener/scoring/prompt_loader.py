from pathlib import Path

from resume_screener.scoring.exceptions import ScoringError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the scoring prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled scoring_prompt.txt.

    Returns:
        The raw template with ``{job_description}`` and ``{resume_text}``
        placeholders.

    Raises:
        ScoringError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "scoring_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScoringError(f"Failed to load prompt template: {exc}") from exc


def build_prompt(template: str, *, resume_text: str, job_description: str) -> str:
    """Embed the job description and resume verbatim into the template."""
    return template.format(job_description=job_description, resume_text=resume_text)
