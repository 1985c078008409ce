"""
Configuration and environment handling for the Buyer's Tool.

Nothing here feeds into rule evaluation. Thresholds live in the rule
registry so that identical input always compiles to identical output.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class LoggingConfig(BaseModel):
    """Logging configuration (applied by the command-line runner only)."""
    level: str = Field(default_factory=lambda: os.getenv("BUYERS_TOOL_LOG_LEVEL", "INFO").upper())
    format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s")


class TraceSummaryConfig(BaseModel):
    """Defaults for the human-readable trace summary."""
    max_items: int = Field(
        default_factory=lambda: int(os.getenv("BUYERS_TOOL_SUMMARY_MAX_ITEMS", "10")),
        ge=1,
        description="Max rules listed per summary section",
    )
    include_info: bool = Field(default_factory=lambda: _env_flag("BUYERS_TOOL_SUMMARY_INCLUDE_INFO"))
    include_passed: bool = Field(default_factory=lambda: _env_flag("BUYERS_TOOL_SUMMARY_INCLUDE_PASSED"))


class Config(BaseModel):
    """Main configuration."""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    trace_summary: TraceSummaryConfig = Field(default_factory=TraceSummaryConfig)

    # Paths
    exports_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("BUYERS_TOOL_EXPORTS_DIR", "exports"))
    )


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
