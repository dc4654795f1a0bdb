from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENV_FILE = ".env.local"


class Settings(BaseSettings):
    """Connection details for the Appwrite project being seeded.

    Every value is required. Variable names match the ones the mobile app
    already keeps in its `.env.local`, so the same file drives both.
    """

    endpoint: str = Field(min_length=1, validation_alias="EXPO_PUBLIC_APPWRITE_ENDPOINT")
    project_id: str = Field(min_length=1, validation_alias="EXPO_PUBLIC_APPWRITE_PROJECT_ID")
    database_id: str = Field(min_length=1, validation_alias="EXPO_PUBLIC_APPWRITE_DATABASE_ID")
    agents_collection_id: str = Field(
        min_length=1, validation_alias="EXPO_PUBLIC_APPWRITE_AGENTS_TABLE_ID"
    )
    galleries_collection_id: str = Field(
        min_length=1, validation_alias="EXPO_PUBLIC_APPWRITE_GALLERIES_TABLE_ID"
    )
    reviews_collection_id: str = Field(
        min_length=1, validation_alias="EXPO_PUBLIC_APPWRITE_REVIEWS_TABLE_ID"
    )
    properties_collection_id: str = Field(
        min_length=1, validation_alias="EXPO_PUBLIC_APPWRITE_PROPERTIES_TABLE_ID"
    )
    api_key: str = Field(min_length=1, validation_alias="APPWRITE_API_KEY")

    model_config = SettingsConfigDict(env_file=DEFAULT_ENV_FILE, extra="ignore")

    @property
    def collections(self) -> list[str]:
        """Collection ids in the order they are cleared."""
        return [
            self.agents_collection_id,
            self.reviews_collection_id,
            self.galleries_collection_id,
            self.properties_collection_id,
        ]


def load_settings(env_file: Optional[str] = DEFAULT_ENV_FILE) -> Settings:
    return Settings(_env_file=env_file)


def missing_env_vars(error: ValidationError) -> list[str]:
    """Names of the variables that were absent or empty."""
    missing = []
    for err in error.errors():
        if err["type"] in ("missing", "string_too_short") and err["loc"]:
            missing.append(str(err["loc"][0]))
    return missing
