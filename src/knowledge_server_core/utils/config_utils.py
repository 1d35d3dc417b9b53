"""
Configuration helpers
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from ..exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "config.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {
        "host": "0.0.0.0",
        "port": 3000,
    },
    "upload": {
        "max_size_mb": 20,
        "allowed_extensions": [".pdf", ".docx"],
    },
    "ocr": {
        "provider": "tesseract",
        "language": "eng",
        "dpi": 300,
        "model": None,
    },
    "database": {
        "backend": "memory",
        "dsn": None,
        "table": "knowledge_base",
        "min_pool_size": 1,
        "max_pool_size": 10,
        "command_timeout": 30,
    },
    "llm": {
        "api_key": None,
        "model": "gemini-pro",
        "endpoint": "https://generativelanguage.googleapis.com/v1beta/models",
        "timeout": 60,
        "max_retries": 3,
    },
    "logging": {
        "dir": "logs",
        "level": "INFO",
        "rotation": "100 MB",
    },
}

# environment variable -> (section, key)
ENV_OVERRIDES = {
    "PORT": ("server", "port"),
    "OCR_PROVIDER": ("ocr", "provider"),
    "OCR_LANGUAGE": ("ocr", "language"),
    "DATABASE_URL": ("database", "dsn"),
    "GOOGLE_API_KEY": ("llm", "api_key"),
    "GEMINI_MODEL": ("llm", "model"),
    "LOG_LEVEL": ("logging", "level"),
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML config file"""
    config_path = Path(config_path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file: {config_path}", details=str(e)) from e
    if not isinstance(config, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")
    return config


def read_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Read the main config: defaults, then the YAML file, then environment variables

    The file is ``config_path``, else ``$KNOWLEDGE_SERVER_CONFIG``, else
    ``config/config.yaml`` in the project root. A missing default file is not an error.
    """
    load_dotenv()

    path = config_path or os.getenv("KNOWLEDGE_SERVER_CONFIG")
    if path:
        config = _merge(DEFAULT_CONFIG, load_config(path))
    elif DEFAULT_CONFIG_PATH.exists():
        config = _merge(DEFAULT_CONFIG, load_config(DEFAULT_CONFIG_PATH))
    else:
        config = copy.deepcopy(DEFAULT_CONFIG)

    for env_key, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_key)
        if value:
            config.setdefault(section, {})[key] = value

    # DATABASE_URL implies the postgres backend
    if os.getenv("DATABASE_URL") and config["database"].get("backend") == "memory":
        config["database"]["backend"] = "postgres"

    try:
        config["server"]["port"] = int(config["server"]["port"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid server port: {config['server']['port']}") from e

    return config


def mk_logs_path(config: Dict[str, Any]) -> Path:
    """Create the log directory"""
    log_path = Path(config["logging"]["dir"])
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path
