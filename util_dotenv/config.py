from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env_file: str = ".env"
    example_file: str = ".env.example"
    encoding: str = "utf-8"
    log_level: str = "INFO"
    quiet: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().upper() or cls.model_fields["log_level"].default  # type: ignore[index]
        return value

    class Config:
        env_prefix = "UTIL_DOTENV_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
