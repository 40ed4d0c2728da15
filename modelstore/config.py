# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Provides typed config objects to the store factory and CLI.
#   The store classes themselves never read configuration.
#
# CLASSES:
# --------
# - ModelStoreConfig (dataclass)
#     location: str       (default "models/")   MODEL_STORE_DIR
#     backend: str        (default "file")      MODEL_STORE_BACKEND
#     indent: int         (default 2)           MODEL_STORE_INDENT
#     atomic_writes: bool (default True)        MODEL_STORE_ATOMIC_WRITES
#
# - AppConfig (dataclass)
#     store: ModelStoreConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from modelstore.config import get_config
#   config = get_config()
#   print(config.store.location)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class ModelStoreConfig:
    """Persisted model store configuration."""
    location: str = "models/"
    backend: str = "file"
    indent: int = 2
    atomic_writes: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    store: ModelStoreConfig = field(default_factory=ModelStoreConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.
    
    Returns:
        AppConfig: Application configuration
    """
    global _config_instance
    
    if _config_instance is not None:
        return _config_instance
    
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    store_config = ModelStoreConfig(
        location=os.getenv("MODEL_STORE_DIR", "models/"),
        backend=os.getenv("MODEL_STORE_BACKEND", "file"),
        indent=int(os.getenv("MODEL_STORE_INDENT", "2")),
        atomic_writes=_env_bool("MODEL_STORE_ATOMIC_WRITES", "true")
    )
    
    _config_instance = AppConfig(store=store_config)
    
    return _config_instance
