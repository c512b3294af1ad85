"""
Configuration settings for the Word Scramble Discord Bot.
Loads environment variables and defines constants.
"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Discord Bot Token
    discord_token: Optional[str] = Field(default=None, validation_alias="DISCORD_TOKEN")

    # Database (dictionary lookup cache only)
    database_url: str = Field(
        default="sqlite+aiosqlite:///word_scramble.db",
        validation_alias="DATABASE_URL"
    )

    # Start words, one per line
    start_words_path: str = Field(default="data/start.txt", validation_alias="START_WORDS_PATH")

    # Dictionary settings
    dictionary_backend: str = Field(default="api", validation_alias="DICTIONARY_BACKEND")  # "api" or "wordlist"
    dictionary_words_path: Optional[str] = Field(default=None, validation_alias="DICTIONARY_WORDS_PATH")
    dictionary_language: str = Field(default="en", validation_alias="DICTIONARY_LANGUAGE")
    dictionary_api_url: str = Field(
        default="https://api.dictionaryapi.dev/api/v2/entries",
        validation_alias="DICTIONARY_API_URL"
    )
    dictionary_timeout_seconds: float = Field(default=10, validation_alias="DICTIONARY_TIMEOUT_SECONDS")

    # Cache settings
    word_cache_expiry_days: int = Field(default=30, validation_alias="WORD_CACHE_EXPIRY_DAYS")

    # Game settings
    allow_root_word: bool = Field(default=False, validation_alias="ALLOW_ROOT_WORD")

    # Development mode
    dev_mode: bool = Field(default=False, validation_alias="DEV_MODE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Global settings instance
SETTINGS = Settings()

# Root word used when the start word list has no usable entry
DEFAULT_ROOT_WORD = "silkworm"

# Dictionary backends
class DictionaryBackend:
    API = "api"
    WORDLIST = "wordlist"

# Logger names
LOGGER_NAME_MAIN = "__main__"
LOGGER_NAME_GAME = "__game__"
LOGGER_NAME_DICTIONARY = "__dictionary__"
LOGGER_NAME_DB = "__database__"

DEFAULT_LANGUAGE = "en"
