from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nested_navigator.core.paths import DEFAULT_MAX_DEPTH


class Settings(BaseSettings):
  log_level: str = "WARNING"

  # Output
  indent: int = Field(default=2, ge=0, description="JSON indent for printed results")
  missing_text: str = Field(
    default="<missing>", description="Text printed for an absent result"
  )

  # Path discovery
  max_depth: int = Field(
    default=DEFAULT_MAX_DEPTH, ge=0, description="Default depth for listing paths"
  )

  model_config = SettingsConfigDict(
    env_prefix="NESTED_NAV_",
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
  )


settings = Settings()
