from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables before everything else
load_dotenv()


class Settings(BaseSettings):
    """Library settings."""

    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")
    LOG_LEVEL: str = Field(default="INFO")

    # Emit a debug event for every payload the codec rejects
    LOG_DECODE_FAILURES: bool = Field(default=True)

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


settings = Settings()
