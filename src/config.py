from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_name: str = "CMHC Mortgage Calculator"
    debug: bool = False
    log_level: str = "INFO"

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    cors_origins: list[str] = ["http://localhost:3000"]

    # Dashboard
    dashboard_port: int = 8050
    # Empty = call the engine in-process instead of going through the API
    calculator_api_url: str = ""
    http_timeout: float = 15.0


settings = Settings()
