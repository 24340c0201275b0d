"""Wall-clock source for the ${date} token."""

from __future__ import annotations

import locale
from datetime import datetime
from typing import Callable

Clock = Callable[[], str]


def use_system_locale() -> str:
    """Adopt the LC_TIME locale named by the environment (LC_ALL, LC_TIME, LANG).

    Python starts in the C locale, so without this %x/%X ignore the user's
    settings. Returns the locale now in effect; an uninstalled locale leaves
    the current one in place.
    """
    try:
        return locale.setlocale(locale.LC_TIME, '')
    except locale.Error:
        return locale.setlocale(locale.LC_TIME)


def local_timestamp(now: datetime | None = None) -> str:
    # Locale-dependent date and time: "01/01/24, 12:00:00" in C, "01.01.2024, 12:00:00" in ru_RU
    return (now or datetime.now()).strftime('%x, %X')
