import os

from dotenv import load_dotenv, find_dotenv


_ENV_LOADED = False


def _ensure_env_loaded():
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    # Values already in the environment win over the .env file.
    load_dotenv(find_dotenv('.env', usecwd=True), override=False)
    _ENV_LOADED = True


def _require(value, message):
    if not value:
        raise ValueError(f"Missing required config: {message}")
    return value


def get_slack_token():
    _ensure_env_loaded()
    return _require(os.getenv("SLACK_TOKEN", ""), "SLACK_TOKEN")
