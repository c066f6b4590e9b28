from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_allow_origins: list[str] = ["*"]

    uploads_dir: str = "uploads"
    max_concurrency: int = 8

    pdf_engine: str = "pdfplumber"

    oracle_provider: str = "groq"
    oracle_model_name: str = "llama-3.1-8b-instant"
    oracle_temperature: float = 0.2
    oracle_max_output_tokens: int = 500
    oracle_timeout_seconds: int = 30
    oracle_max_retries: int = 1

    groq_api_key: str = ""
    openai_api_key: str = ""
    openrouter_api_key: str = ""
    together_api_key: str = ""
    deepseek_api_key: str = ""
    ollama_api_key: str = "ollama"
    oracle_openai_compatible_api_key: str = ""
    oracle_openai_compatible_base_url: str = ""
