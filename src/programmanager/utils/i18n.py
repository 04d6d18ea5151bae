from __future__ import annotations

"""
Internationalization (i18n) Utility.

Singleton translation manager with dot-notation lookup over nested JSON
locale files and keyword interpolation, shared by the CLI and GUI.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


class I18n:
    """
    Resource manager for locale-specific string translations.

    Loads one JSON resource file from the locale directory and resolves
    keys such as 'gui.programs.header'.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        """
        Args:
            locale: ISO locale identifier (e.g., 'en', 'es').
        """
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Load a translation dictionary from the locale directory.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
            self._locale = locale
            self.is_loaded = True
            logger.debug(f"I18n: Loaded locale dictionary: {locale}")
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'gui.buttons.save').
            default: Text used when the key is missing.
            **kwargs: Variables for str.format interpolation.

        Returns:
            str: The translated string, the default, or the key itself.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if isinstance(current_val, dict):
                current_val = current_val.get(k)
            else:
                current_val = None
                break

        if not isinstance(current_val, str):
            if default is None:
                return key
            current_val = default

        if not kwargs:
            return current_val
        try:
            return current_val.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation error for '{key}': {e}")
            return current_val


# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
