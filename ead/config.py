"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseModel):
    """EAD backend REST API configuration."""

    # Base URL of the school API, including any version prefix
    base_url: str = "http://localhost:8080/api/v1"

    # Bearer token sent with every request (optional for public endpoints)
    api_token: str | None = None

    timeout: float = 30.0


class PagingSettings(BaseModel):
    """Pagination configuration for list accumulation."""

    # Page size used when loading every page of a list
    per_page: int = 50

    # Upper bound on pages accumulated by a single fetch_all call
    max_pages: int = 1000


class ThreadSettings(BaseModel):
    """Thread traversal configuration."""

    # Guard against cyclic parent chains in backend data
    max_traversal_depth: int = 50
    # Moderation client sessions holding thread caches at once
    max_sessions: int = 256


class ReplyPolicySettings(BaseModel):
    """Constraints a comment or reply must satisfy before submission."""

    min_length: int = 3
    max_length: int = 500

    # None means unbounded nesting
    max_depth: int | None = 3


class PolicySettings(BaseModel):
    """Reply policies per flow.

    The student-facing activity page and the moderator pages historically used
    different limits, so both are explicit here instead of sharing one value.
    """

    student: ReplyPolicySettings = ReplyPolicySettings(
        min_length=3, max_length=500, max_depth=3
    )
    moderator: ReplyPolicySettings = ReplyPolicySettings(
        min_length=2, max_length=500, max_depth=None
    )

    # Extra denylist words appended to the built-in list
    extra_denylist: list[str] = []


class LabelSettings(BaseModel):
    """Display label configuration."""

    locale: Literal["en", "pt-BR"] = "en"


class DatabaseSettings(BaseModel):
    """Moderation notes store configuration."""

    url: str = "sqlite+aiosqlite:///./ead_notes.db"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested sections:

        BACKEND__BASE_URL=https://school.example.com/api/v1
        BACKEND__API_TOKEN=...
        POLICIES__STUDENT__MAX_DEPTH=4
        LABELS__LOCALE=pt-BR
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows BACKEND__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000

    # Origins allowed to call the API (the admin/student frontends)
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Nested settings
    backend: BackendSettings = BackendSettings()
    paging: PagingSettings = PagingSettings()
    thread: ThreadSettings = ThreadSettings()
    policies: PolicySettings = PolicySettings()
    labels: LabelSettings = LabelSettings()
    database: DatabaseSettings = DatabaseSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
