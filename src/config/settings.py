"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use CTTT_ prefix (e.g., CTTT_ALLOWED_KINDS=name,change).

Settings can also be loaded from a .env file in the project root.

These settings configure the command-line tool only; parse() and
parse_strict() take everything they need as arguments.
"""

from typing import FrozenSet

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use CTTT_ prefix.

    Examples:
        CTTT_ALLOWED_KINDS=name,change,rename
        CTTT_FILE_PATTERN=**/*.rs
        CTTT_REPORT_FILE=cttt.json
    """

    model_config = SettingsConfigDict(
        env_prefix="CTTT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Strict-mode configuration
    allowed_kinds: str = Field(
        default="name,change",
        description="Comma-separated directive kinds accepted in strict mode when --allow is not given",
    )

    # Input configuration
    file_pattern: str = Field(
        default="**/*",
        description="Glob (relative to inputdir) selecting files to scan",
    )

    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read source files",
    )

    # Output configuration
    report_file: str = Field(
        default="directives.json",
        description="Report filename written inside outputdir",
    )

    def kinds_parse(self, value: str | None = None) -> FrozenSet[str]:
        """
        Split a comma-separated kind list into a set.

        Args:
            value: Comma-separated kinds; defaults to allowed_kinds

        Returns:
            Frozen set of non-empty, stripped kind strings

        Example:
            >>> settings = AppSettings()
            >>> sorted(settings.kinds_parse("name, change,"))
            ['change', 'name']
        """
        if value is None:
            value = self.allowed_kinds
        return frozenset(kind.strip() for kind in value.split(",") if kind.strip())


# Singleton instance - import this in your code
appsettings = AppSettings()
