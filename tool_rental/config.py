import os

from dotenv import load_dotenv

# Read a local .env (if any) before the class attributes below are evaluated
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration; every value can be overridden from the environment."""
    SECRET_KEY = os.environ.get("SECRET_KEY") or "tool-rental-secret"
    # Empty -> in-memory store, lost on exit. A file path -> pickled to disk.
    STORE_PATH = os.environ.get("STORE_PATH") or None
    # Put the three sample tools into an empty catalogue at startup
    SEED_SAMPLE_TOOLS = _env_flag("SEED_SAMPLE_TOOLS", True)
    DISPLAY_TIMEZONE = os.environ.get("DISPLAY_TIMEZONE") or "Europe/Berlin"
    CURRENCY = os.environ.get("CURRENCY") or "EUR"
    LOG_LEVEL = os.environ.get("LOG_LEVEL") or "INFO"
    PORT = int(os.environ.get("PORT") or 3000)
    TESTING = False


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test"
    STORE_PATH = None
    SEED_SAMPLE_TOOLS = False
    DISPLAY_TIMEZONE = "UTC"
