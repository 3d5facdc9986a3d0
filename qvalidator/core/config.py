"""
Configuration for the question validator using Pydantic settings.
Reads from environment variables or .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidatorSettings(BaseSettings):
    """Global config for the validation engine and its optional LLM layer."""

    # environment
    environment: str = "development"
    log_level: str = "INFO"

    # llm provider: none, ollama, openai, anthropic
    llm_provider: str = "none"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = "https://api.openai.com/v1"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-3-haiku-20240307"
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1:8b-instruct-q4_0"
    llm_timeout_seconds: float = 30.0

    # similarity arbitration, only consulted for borderline questions
    arbitration_enabled: bool = True
    arbitration_timeout_seconds: float = 8.0
    arbitration_cutoff: float = 0.75
    arbitration_temperature: float = 0.1
    arbitration_max_tokens: int = 300

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# singleton instance
settings = ValidatorSettings()


__all__ = ["ValidatorSettings", "settings"]
