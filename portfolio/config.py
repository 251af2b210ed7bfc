"""Runtime settings read from the environment, with defaults for local use."""

import os
from pathlib import Path

from portfolio.i18n import locales

BASE_DIR = Path(__file__).resolve().parent

# --- Settings overridable through environment variables ---
MESSAGES_DIR = Path(os.environ.get("PORTFOLIO_MESSAGES_DIR") or BASE_DIR / "messages")
DEFAULT_LOCALE = os.environ.get("PORTFOLIO_DEFAULT_LOCALE", locales.DEFAULT_LOCALE).strip().lower()
STRICT_MESSAGES = os.environ.get("PORTFOLIO_STRICT_MESSAGES", "1").strip().lower() not in ("0", "false", "no", "off")


def get_registry() -> locales.LocaleRegistry:
    """Registry with the configured default; raises ``LocaleConfigError`` if it is unsupported."""
    return locales.registry.with_default(DEFAULT_LOCALE)
