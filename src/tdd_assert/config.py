"""Settings for the pytest integration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssertSettings(BaseSettings):
    """Configuration for the tdd-assert pytest plugin.

    Loads from environment variables automatically:
        TDD_ASSERT_REQUIRE_ASSERTIONS

    Command line and ini options of the plugin take precedence.
    """

    require_assertions: bool = Field(
        default=False, description="Fail every passing test that made no assertions"
    )

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="TDD_ASSERT_",
    )
