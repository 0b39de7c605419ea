"""Localization of the fixed strings the components render ("close", "Close menu")."""

import gettext as _gettext
from functools import lru_cache
from typing import Optional

from tessera.core.config import ui_setting
from tessera.core.utils import ifnone


@lru_cache(maxsize=8)
def translations(locale: Optional[str] = None) -> _gettext.NullTranslations:
    """Load the message catalog for `locale` (defaults to `TESSERA_UI.LOCALE`).

    Missing catalogs are not an error: the returned `NullTranslations` echoes every message id back.
    """
    locale = ifnone(locale, ui_setting("LOCALE", "en"))
    return _gettext.translation(
        ui_setting("GETTEXT_DOMAIN", "tessera"),
        localedir=ui_setting("LOCALE_DIR"),
        languages=[locale],
        fallback=True,
    )


def gettext(msgid: str, locale: Optional[str] = None) -> str:
    return translations(locale).gettext(msgid)
