"""
Posture - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Literal


class GitLabSettings(BaseSettings):
    """GitLab API configuration."""
    base_url: str = Field("https://gitlab.com", alias="GITLAB_BASE_URL")
    token: Optional[str] = Field(None, alias="GITLAB_AUTH_TOKEN")

    model_config = {"env_prefix": "", "extra": "ignore"}


class GitHubSettings(BaseSettings):
    """GitHub API configuration."""
    api_url: str = Field("https://api.github.com", alias="GITHUB_API_URL")
    token: Optional[str] = Field(None, alias="GITHUB_AUTH_TOKEN")

    model_config = {"env_prefix": "", "extra": "ignore"}


class SearchSettings(BaseSettings):
    """Code search pagination configuration."""
    per_page: int = Field(100, ge=1, le=100, alias="SEARCH_PER_PAGE")
    max_pages: int = Field(10, ge=1, alias="SEARCH_MAX_PAGES")
    timeout_seconds: float = Field(30.0, gt=0, alias="SEARCH_TIMEOUT_SECONDS")

    model_config = {"env_prefix": "", "extra": "ignore"}


class ProbeSettings(BaseSettings):
    """Probe execution configuration."""
    max_workers: int = Field(4, ge=1, alias="PROBE_MAX_WORKERS")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )
    format: Literal["json", "text"] = Field("json", alias="LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    gitlab: GitLabSettings = Field(default_factory=GitLabSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    probe: ProbeSettings = Field(default_factory=ProbeSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
