from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class AgentDescriptor(BaseModel):
    """Immutable description of a single LLM agent.

    Build descriptors through :meth:`create`, which reports any missing or
    empty field as a :class:`ConfigurationError`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Unique name for this agent, used as the discovery key")
    model: str = Field(..., description="Model name the harness resolves when running this agent")
    description: str = Field(..., description="Human-readable description of agent's purpose")
    instruction: str = Field(..., description="Behavioral instruction handed to the model")

    @field_validator("name", "model", "description", "instruction")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("name")
    @classmethod
    def _name_is_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"{value!r} is not a valid identifier")
        return value

    @classmethod
    def create(cls, **fields: Any) -> "AgentDescriptor":
        try:
            return cls(**fields)
        except ValidationError as exc:
            invalid = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ConfigurationError(f"Invalid agent descriptor ({details})", fields=invalid) from exc


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log_level: str = Field(default="INFO")
    log_dir: Optional[Path] = Field(default=None)
    agents_package: str = Field(default="deepsearch_agents.agents")
    model_provider: str = Field(default="google-gla")
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
