"""Elapsed-time formatting for the stats line and the win screen."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LOCALE = "en"


@dataclass(frozen=True)
class Wording:
    hour: tuple[str, str]
    minute: tuple[str, str]
    second: tuple[str, str]
    conjunction: str


# (singular, plural) per unit.
WORDINGS: dict[str, Wording] = {
    "en": Wording(
        hour=("hour", "hours"),
        minute=("minute", "minutes"),
        second=("second", "seconds"),
        conjunction="and",
    ),
    "sv": Wording(
        hour=("timme", "timmar"),
        minute=("minut", "minuter"),
        second=("sekund", "sekunder"),
        conjunction="och",
    ),
}


def _split(seconds: int) -> tuple[int, int, int]:
    if seconds < 0:
        raise ValueError(f"Elapsed time cannot be negative, got {seconds}.")
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return hours, minutes, secs


def format_clock(seconds: int) -> str:
    """``HH:MM:SS``; the hour field grows past two digits instead of wrapping."""
    h, m, s = _split(seconds)
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_readable(seconds: int, locale: str = DEFAULT_LOCALE) -> str:
    """Spell out *seconds*, e.g. ``"1 hour, 1 minute and 1 second"``.

    Zero-valued units are left out, except that seconds are always shown
    when everything is zero.
    """
    try:
        words = WORDINGS[locale]
    except KeyError:
        raise ValueError(
            f"Unknown locale {locale!r}; expected one of {sorted(WORDINGS)}."
        ) from None

    h, m, s = _split(seconds)
    parts: list[str] = []
    for value, (singular, plural) in ((h, words.hour), (m, words.minute)):
        if value > 0:
            parts.append(f"{value} {singular if value == 1 else plural}")
    if s > 0 or not parts:
        singular, plural = words.second
        parts.append(f"{s} {singular if s == 1 else plural}")

    if len(parts) == 1:
        return parts[0]
    return f"{', '.join(parts[:-1])} {words.conjunction} {parts[-1]}"
