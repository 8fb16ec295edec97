"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class UserDeckSettings(BaseSettings):
    """User directory configuration."""

    endpoint_url: str = "https://jsonplaceholder.typicode.com/users"
    timeout: float = 10.0
    user_agent: str = "UserDeck/0.1"
    reveal_step: float = 0.1
    log_level: str = "WARNING"

    model_config = {"env_prefix": "USERDECK_"}


settings = UserDeckSettings()
