from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=[".env"], extra="ignore")

    circleci_token: str | None = Field(default=None)

    # optional default project, e.g. "github/org/repo"
    circleci_project_slug: str | None = None


# circleci service constants
CIRCLECI_API_URL = "https://circleci.com/api/v2"
CIRCLECI_TOKEN_HEADER = "Circle-Token"

settings = Settings()
