"""Display-name translation hook.

Growth rates carry an untranslated name key. Whatever localization system the
host game uses installs itself with ``set_translator``; until then names are
returned unchanged. Translated names are for display only and never used to
identify a growth rate.
"""

from __future__ import annotations

from typing import Callable, Optional

_translator: Optional[Callable[[str], str]] = None


def set_translator(func: Optional[Callable[[str], str]]) -> None:
    global _translator
    _translator = func


def translate(key: str) -> str:
    if _translator is None:
        return key
    return _translator(key)


__all__ = ["set_translator", "translate"]
