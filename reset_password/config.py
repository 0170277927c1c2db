import os
import yaml

# Path of the YAML settings file; defaults to env.yaml in the working directory
CONFIG_PATH_ENV_VAR = "RESET_PASSWORD_CONFIG"
DEFAULT_CONFIG_FILE = "env.yaml"


def load_config_data(path=None) -> dict:
    path = (
        path
        or os.environ.get(CONFIG_PATH_ENV_VAR)
        or os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
    )
    if not os.path.exists(path):
        return dict()
    with open(path, "r") as r_file:
        return yaml.safe_load(r_file) or dict()


data = load_config_data()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./reset_password.db")
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    RESET_TOKEN_LIFETIME = int(data.get("RESET_TOKEN_LIFETIME", 3600))
    SELECTOR_LENGTH = int(data.get("SELECTOR_LENGTH", 20))
    VERIFIER_LENGTH = int(data.get("VERIFIER_LENGTH", 20))
    SIGNING_KEY = data.get("SIGNING_KEY", "dev-signing-key-change-in-production")
    REQUEST_THROTTLE_LIMIT = int(data.get("REQUEST_THROTTLE_LIMIT", 3600))
    ENABLE_GARBAGE_COLLECTION = bool(data.get("ENABLE_GARBAGE_COLLECTION", True))
