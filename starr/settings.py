"""
Initializes the Dynaconf settings object for the starr command line.
This module is the single source of truth for all configuration.

Environment variables prefixed with `STARR_` override the files, with a
double underscore between section and key, e.g. `STARR_RADARR__API_KEY`.
"""

from pathlib import Path
from dynaconf import Dynaconf

PROJECT_ROOT = Path(__file__).parent.parent

settings = Dynaconf(
    root_path=PROJECT_ROOT,
    settings_files=["config/settings.toml"],
    secrets=["config/.secrets.toml"],
    envvar_prefix="STARR",
    merge_enabled=True,
    load_dotenv=False,
    environments=False,
)
