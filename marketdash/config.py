from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    quote_timeout: float = 10.0
    batch_timeout: float = 30.0
    default_history_range: str = "1y"
    analyst_upgrade_limit: int = 5

    model_config = {"env_prefix": ""}


settings = Settings()
