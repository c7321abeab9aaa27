# -*- coding: utf-8 -*-
"""
Internationalization (i18n) module for Task Tracker.

This module provides translation functions and language management.
Supports English and German with automatic system locale detection.
"""

import locale
import logging
from typing import Callable, List

from tasktracker.i18n.translations import TRANSLATIONS

logger = logging.getLogger(__name__)

# Supported languages
SUPPORTED_LANGUAGES = ["en", "de"]

# Current language (default to English)
_current_language = "en"

# Callbacks to notify when language changes
_language_changed_callbacks: List[Callable[[str], None]] = []


def detect_system_language() -> str:
    """
    Detect the system language and return a supported language code.

    Returns:
        'de' if German is detected, 'en' otherwise.
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        return 'en'
    if system_locale and system_locale.lower().startswith('de'):
        return 'de'
    return 'en'


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def set_language(lang: str) -> None:
    """
    Set the current language.

    Args:
        lang: Language code ('en', 'de' or 'auto')
    """
    global _current_language
    if lang == 'auto':
        lang = detect_system_language()
    if lang not in SUPPORTED_LANGUAGES:
        lang = 'en'
    _current_language = lang

    for callback in _language_changed_callbacks:
        try:
            callback(lang)
        except Exception:
            logger.warning("Language change callback %r failed", callback, exc_info=True)


def tr(key: str, **kwargs) -> str:
    """
    Get the translated string for the given key.

    Args:
        key: Translation key (e.g., 'time.tomorrow')
        **kwargs: Format arguments for string interpolation

    Returns:
        Translated string, or the key itself if not found.
    """
    translations = TRANSLATIONS.get(_current_language, TRANSLATIONS['en'])
    text = translations.get(key, TRANSLATIONS['en'].get(key, key))

    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            pass

    return text


def on_language_changed(callback: Callable[[str], None]) -> None:
    """
    Register a callback to be notified when language changes.

    Args:
        callback: Function that takes the new language code as argument.
    """
    if callback not in _language_changed_callbacks:
        _language_changed_callbacks.append(callback)


def remove_language_callback(callback: Callable[[str], None]) -> None:
    """Remove a previously registered language change callback."""
    if callback in _language_changed_callbacks:
        _language_changed_callbacks.remove(callback)


def get_available_languages() -> List[tuple]:
    """
    Get list of available languages for display.

    Returns:
        List of (code, display_name) tuples.
    """
    return [
        ('en', 'English'),
        ('de', 'Deutsch'),
    ]
