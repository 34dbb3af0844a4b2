from logarchive.env.env import (
    ConfigError,
    Environment,
    get_env,
    get_logging_env,
    reset_env_caches,
    _load_dotenv,
)

from logarchive.env.paths import CONFIG_DIR, PROJECT_ROOT, command_logs_dir, logs_dir

__all__ = [
    "ConfigError",
    "Environment",
    "get_env",
    "get_logging_env",
    "reset_env_caches",
    "_load_dotenv",
    "CONFIG_DIR",
    "PROJECT_ROOT",
    "command_logs_dir",
    "logs_dir",
]
