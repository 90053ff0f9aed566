from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str
    port: int
    debug: bool
    token_secret: str  # HMAC key for session tokens, read-only after startup
    token_lifetime_days: int = 7
    password_hash_rounds: int = 10  # bcrypt work factor
    cookie_secure: bool = True  # Disable only for local development over plain HTTP
    cors_origins: list[str] = []

    model_config = {
        "env_file": [".env"],
        "env_prefix": "MESTO_",
        "extra": "ignore",
    }
