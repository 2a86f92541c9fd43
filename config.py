"""
Configuration file for the Phone Reveal Scraper API
"""
import os
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv

# .env is looked up from the working directory the process starts in
load_dotenv(find_dotenv(usecwd=True))


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


# Server Settings
PORT = _env_int("PORT", 3003)
HOST = os.environ.get("HOST", "0.0.0.0")
APP_URL = os.environ.get("APP_URL", "")  # only used in the startup log line

# Selectors for the target page markup
PHONE_BUTTON_SELECTOR = os.environ.get("PHONE_BUTTON_SELECTOR", 'i[rest="user-phone"]')
PHONE_TEXT_SELECTOR = os.environ.get("PHONE_TEXT_SELECTOR", "div.--flex-1.--pl-4.--pr-4")

# Browser Settings (None = Playwright default timeout)
BROWSER_HEADLESS = _env_bool("BROWSER_HEADLESS", True)
NAVIGATION_TIMEOUT_MS = _env_int("NAVIGATION_TIMEOUT_MS")
SELECTOR_TIMEOUT_MS = _env_int("SELECTOR_TIMEOUT_MS")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def get_config() -> Dict:
    """Get complete configuration dictionary"""
    return {
        "server": {
            "host": HOST,
            "port": PORT,
            "app_url": APP_URL,
        },
        "selectors": {
            "button": PHONE_BUTTON_SELECTOR,
            "phone": PHONE_TEXT_SELECTOR,
        },
        "browser": {
            "headless": BROWSER_HEADLESS,
            "navigation_timeout": NAVIGATION_TIMEOUT_MS,
            "selector_timeout": SELECTOR_TIMEOUT_MS,
        },
        "logging": {
            "level": LOG_LEVEL,
        },
    }
