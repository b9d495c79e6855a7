"""
Initializes the Dynaconf settings object for the Modrinth client.
This module is the single source of truth for all configuration.

Settings are layered: the defaults shipped next to this module, then
config/settings.toml and config/.secrets.toml in the working directory,
then environment variables prefixed with MODRINTH_.
"""

from pathlib import Path

from dynaconf import Dynaconf

PACKAGE_ROOT = Path(__file__).parent
DEFAULT_SETTINGS_FILE = PACKAGE_ROOT / "settings.toml"


def load_settings(*settings_files: str) -> Dynaconf:
    """Builds a settings object, optionally from explicit files."""
    files = settings_files or ("config/settings.toml",)
    return Dynaconf(
        settings_files=[str(DEFAULT_SETTINGS_FILE), *files],
        secrets="config/.secrets.toml",
        envvar_prefix="MODRINTH",
        merge_enabled=True,
        load_dotenv=False,
        environments=False,
    )

