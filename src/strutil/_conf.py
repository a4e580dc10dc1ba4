from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .hashing import password_hash
from .policy import PasswordPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid",
        validate_default=False,
        env_nested_delimiter="__",
    )

    password_salt: str = ""
    policy: PasswordPolicy = Field(default_factory=PasswordPolicy)

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings

    def salted_hash(self, *values: str) -> str:
        return password_hash(self.password_salt, *values)
