"""
cli/i18n/messages/__init__.py - Message Registry

Structure:
    MESSAGES = {
        "cli.select_failed": {"ko": "...", "en": "..."},
        ...
    }
"""

from __future__ import annotations

from typing import TypedDict


class MessageDict(TypedDict):
    """Message dictionary type."""

    ko: str
    en: str


MESSAGES: dict[str, MessageDict] = {}


def register_messages(namespace: str, messages: dict[str, MessageDict]) -> None:
    """Register messages for a namespace."""
    for key, value in messages.items():
        MESSAGES[f"{namespace}.{key}"] = value


from cli.i18n.messages.cli_commands import CLI_MESSAGES  # noqa: E402

register_messages("cli", CLI_MESSAGES)
