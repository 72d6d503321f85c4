"""
cli/i18n/__init__.py - Internationalization (i18n) Module

Provides ko/en translation for CLI output.
Korean (ko) is the default language.

Usage:
    from cli.i18n import t, set_lang

    print(t("cli.selected_zones", region="us-west-2"))

    set_lang("en")
    print(t("cli.no_eligible_hint"))
"""

from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import Any

_current_lang: ContextVar[str] = ContextVar("lang", default="ko")

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"


def get_lang() -> str:
    """Get current language from context variable."""
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """Set current language (unsupported values fall back to ko)."""
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG
    _current_lang.set(lang)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Translate a message key to the current language.

    Args:
        key: Message key in namespace.key format (e.g., "cli.select_failed")
        lang: Optional language override
        **kwargs: Format string arguments for interpolation

    Returns:
        Translated string, or key if translation not found
    """
    from cli.i18n.messages import MESSAGES

    if lang is None:
        lang = get_lang()
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG

    msg_dict = MESSAGES.get(key)
    if msg_dict is None:
        return key

    text = msg_dict.get(lang) or msg_dict.get(DEFAULT_LANG, key)

    if kwargs:
        with contextlib.suppress(KeyError, ValueError):
            text = text.format(**kwargs)

    return text


__all__ = [
    "t",
    "get_lang",
    "set_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
