from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Generator settings loaded from environment variables.

    Every field can be overridden with a ``DOCKGEN_`` prefixed variable,
    e.g. ``DOCKGEN_DEFAULT_NET_VERSION=9.0``. Default versions are the
    fallbacks used when a project carries no version metadata at all;
    bump them here when a new LTS release ships.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCKGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Toolchain fallbacks
    default_net_version: str = "8.0"
    default_go_version: str = "1.22"

    # Build layout
    publish_dir: str = "/app/publish"

    # Port acquisition: when strict, a failed prompt aborts generation
    # instead of falling back to default_port.
    default_port: str = "8080"
    strict_port: bool = False
    prompt_label: str = "Enter Port"

    # Logging
    log_level: str = "INFO"

    @field_validator("default_port", mode="before")
    @classmethod
    def coerce_port(cls, v: object) -> str:
        return str(v).strip()

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    return Settings()
