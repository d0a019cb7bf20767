"""Configuration management for DailyEdge."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path

DATA_DIR = Path("data")
CONFIG_PATH = DATA_DIR / "config.json"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """Represents persisted configuration for the application."""

    data_directory: str = str(DATA_DIR)
    default_target_minutes: int = 25
    tick_interval_ms: int = 200
    log_level: str = "INFO"
    log_file: str = "dailyedge.log"

    @classmethod
    def default(cls) -> "AppConfig":
        """Return default configuration values."""
        return cls()

    @property
    def data_path(self) -> Path:
        return Path(self.data_directory).expanduser()

    @property
    def state_path(self) -> Path:
        return self.data_path / "state.json"


def ensure_data_dir(path: Path = DATA_DIR) -> None:
    """Ensure the data directory exists."""
    path.mkdir(parents=True, exist_ok=True)


def load_config(path: Path = CONFIG_PATH) -> AppConfig:
    """Load configuration from disk or create defaults."""
    if not path.exists():
        cfg = AppConfig.default()
        try:
            save_config(cfg, path)
        except OSError as exc:
            logger.warning("Could not write default config to %s: %s", path, exc)
        return cfg

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        return _config_from_dict(raw)
    except (OSError, ValueError, AttributeError) as exc:
        # On error, fall back to defaults but do not overwrite existing file.
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return AppConfig.default()


def save_config(config: AppConfig, path: Path = CONFIG_PATH) -> None:
    """Persist configuration to disk."""
    ensure_data_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(asdict(config), f, indent=2)


def _config_from_dict(raw: dict) -> AppConfig:
    """Safely build AppConfig from a dict, tolerating missing keys."""
    defaults = AppConfig.default()
    return AppConfig(
        data_directory=str(raw.get("data_directory", defaults.data_directory)),
        default_target_minutes=_int_or(raw.get("default_target_minutes"), defaults.default_target_minutes),
        tick_interval_ms=max(_int_or(raw.get("tick_interval_ms"), defaults.tick_interval_ms), 1),
        log_level=str(raw.get("log_level", defaults.log_level)).upper(),
        log_file=str(raw.get("log_file", defaults.log_file)),
    )


def _int_or(value: object, fallback: int) -> int:
    if isinstance(value, bool):
        return fallback
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return fallback


def setup_logging(config: AppConfig) -> None:
    """Log to the console and to a UTF-8 file inside the data directory."""
    ensure_data_dir(config.data_path)
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(config.data_path / config.log_file, encoding="utf-8"),
        ],
    )
