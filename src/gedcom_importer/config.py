import os
from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "gedcom_importer.yml"
CONFIG_ENV_VAR = "GEDCOM_IMPORTER_CONFIG"

DEFAULT_DATABASE_URL = "sqlite:///gedcom_importer.db"
DEFAULT_BATCH_SIZE = 20
DEFAULT_SOSA_BATCH_SIZE = 100


class GPConfig:
    def __init__(self, data, source=None):
        self.source = source
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.database = data.get("database", {})
        self.importer = data.get("import", {})
        self.sosa = data.get("sosa", {})
        self.debug = data.get("debug", False)

    @property
    def database_url(self) -> str:
        return self.database.get("url") or DEFAULT_DATABASE_URL

    @property
    def batch_size(self) -> int:
        return int(self.importer.get("batch_size") or DEFAULT_BATCH_SIZE)

    @property
    def root_gedcom_id(self) -> str:
        return str(self.importer.get("root_gedcom_id") or "1")

    @property
    def sosa_batch_size(self) -> int:
        return int(self.sosa.get("batch_size") or DEFAULT_SOSA_BATCH_SIZE)


def _config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def base_dir() -> Path:
    """Directory relative paths (logs, sqlite files) resolve against."""
    if CONFIG_PATH.parent.is_dir():
        return PROJECT_ROOT
    return Path.cwd()


def load_config() -> 'GPConfig':
    path = _config_path()
    if not path.is_file():
        # Installed without the project tree: run on defaults.
        return GPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GPConfig(data, source=path)

_config_cache = None

def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
