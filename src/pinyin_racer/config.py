"""Application configuration using pydantic-settings."""

import functools
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

PROGRESS_FILENAME = "user_data.json"

# settings.yaml section -> {yaml key: Settings field}
_YAML_FIELDS = {
    "server": {"host": "host", "port": "port", "allowed_origins": "allowed_origins"},
    "storage": {"data_dir": "data_dir"},
    "game": {"review_probability": "review_probability", "best_times_cap": "best_times_cap"},
}


def _find_project_root() -> Path:
    here = Path(__file__).resolve()
    return next(
        (p for p in here.parents if (p / "pyproject.toml").exists()),
        here.parents[2],
    )


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Reads ``config/settings.yaml`` below the project root."""

    def get_field_value(self, field_name: str) -> tuple[Any, str, bool]:
        return None, "", False

    def __call__(self) -> dict[str, Any]:
        yaml_path = _find_project_root() / "config" / "settings.yaml"
        if not yaml_path.exists():
            return {}
        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        values = {}
        for section, fields in _YAML_FIELDS.items():
            block = data.get(section) or {}
            for key, field_name in fields.items():
                if block.get(key) is not None:
                    values[field_name] = block[key]
        return values


class Settings(BaseSettings):
    """Application settings loaded from environment and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    allowed_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    # Game
    review_probability: float = Field(default=0.5, ge=0.0, le=1.0)
    best_times_cap: int = Field(default=50, gt=0)

    # Paths
    project_root: Path = Field(default_factory=_find_project_root)
    data_dir: Path | None = Field(default=None)

    @property
    def resolved_data_dir(self) -> Path:
        d = self.data_dir if self.data_dir is not None else self.project_root / "data"
        d.mkdir(parents=True, exist_ok=True)
        return d

    @property
    def progress_path(self) -> Path:
        return self.resolved_data_dir / PROGRESS_FILENAME

    @property
    def frontend_dir(self) -> Path:
        return self.project_root / "public"

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init args, then environment and .env, then settings.yaml."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlSettingsSource(settings_cls),
        )


@functools.lru_cache
def get_settings() -> Settings:
    """Get application settings singleton."""
    return Settings()
