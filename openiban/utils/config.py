"""Configuration for OpenIBAN.

Pydantic-based settings for the static data tables and logging.

Environment Variables:
- OPENIBAN_DATA_DIR: Directory holding the YAML data tables
- OPENIBAN_STRUCTURE_FILE: Per-country structure table (default: structures.yml)
- OPENIBAN_GERMAN_RULES_FILE: Bank code to IBAN rule table (default: german_iban_rules.yml)
- OPENIBAN_SWEDISH_BANK_LOOKUP_FILE: Clearing code ranges (default: swedish_bank_lookup.yml)
- OPENIBAN_LOG_LEVEL: Logging level (default: WARNING)

The logging settings take effect through configure_from_settings(), which
the host application calls; importing openiban does not apply them.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """OpenIBAN settings.

    All settings can be overridden via environment variables with prefix
    OPENIBAN_*

    Example:
        >>> settings = Settings()
        >>> settings.structure_path.name
        'structures.yml'
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENIBAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Static data
    data_dir: Path = Field(
        default=PACKAGE_DATA_DIR,
        description="Directory holding the YAML data tables",
    )

    structure_file: str = Field(
        default="structures.yml",
        description="Per-country IBAN structure table",
    )

    german_rules_file: str = Field(
        default="german_iban_rules.yml",
        description="German bank code to IBAN rule table",
    )

    swedish_bank_lookup_file: str = Field(
        default="swedish_bank_lookup.yml",
        description="Swedish clearing code range table",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    dev_mode: bool = Field(
        default=False,
        description="Use coloured console log output",
    )

    @property
    def structure_path(self) -> Path:
        return self.data_dir / self.structure_file

    @property
    def german_rules_path(self) -> Path:
        return self.data_dir / self.german_rules_file

    @property
    def swedish_bank_lookup_path(self) -> Path:
        return self.data_dir / self.swedish_bank_lookup_file


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the process-wide settings."""
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """Rebuild settings from the environment and drop cached data tables.

    Returns:
        The new Settings instance
    """
    global _settings

    from openiban.data import clear_caches

    _settings = Settings()
    clear_caches()
    return _settings
