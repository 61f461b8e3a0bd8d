from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "AMORTIZATION_",
    }

    # Compounding / payment period used when a caller does not pick one.
    # The documented example (60 periods = 5 years) is monthly.
    default_frequency: str = "monthly"

    # Report
    currency_symbol: str = "$"
    display_places: int = 2

    # API client (cli --api)
    api_url: str = "http://localhost:8000"
    request_timeout: float = 10.0

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
