from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "NyayBuddy"
    gateway_api_key: str = ""
    gateway_base_url: str = "https://ai.gateway.lovable.dev/v1"
    gateway_model: str = "google/gemini-2.5-flash"
    gateway_temperature: float = 0.3
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "NYAYBUDDY_"}


settings = Settings()
