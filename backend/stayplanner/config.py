from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = ""

    # Anthropic
    anthropic_api_key: str = ""

    # LLM extraction
    llm_model_primary: str = "gpt-4o-mini"
    llm_model_fallback: str = "claude-sonnet-4-5-20250929"
    llm_temperature: float = 0.2
    llm_max_tokens: int = 600

    # Exa content search
    exa_api_key: str = ""
    exa_base_url: str = "https://api.exa.ai"
    exa_http_timeout: float = 10.0

    # Brand source fan-out
    source_timeout_seconds: float = 4.0
    source_result_limit: int = 8
    source_max_characters: int = 2400

    # Rate limiting (per client, fixed window)
    rate_limit_requests: int = 10
    rate_limit_window_seconds: int = 60

    # CORS
    cors_origins: str = "http://localhost:3000"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
