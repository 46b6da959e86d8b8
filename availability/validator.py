from __future__ import annotations
from typing import Optional

from .schema import AvailabilityWindow, FieldError

TIME_ORDER_MESSAGE = "O horário de inicio não pode ser anterior ao horário de término"

WEEKDAY_LABELS = (
    "Domingo",
    "Segunda-feira",
    "Terça-feira",
    "Quarta-feira",
    "Quinta-feira",
    "Sexta-feira",
    "Sábado",
)


def validate_window(window: AvailabilityWindow) -> Optional[FieldError]:
    """Check that the window starts strictly before it ends.

    Times are compared as strings. This only holds for fixed-width, zero-padded
    24-hour ``HH:MM:SS`` values (enforced by ``AvailabilityWindow``); any other
    format will compare wrongly without raising.

    Weekdays are not compared: a window whose ``to_weekday`` is before its
    ``from_weekday`` wraps across the end of the week (e.g. Friday to Monday).

    Returns ``None`` when the window is valid.
    """
    if window.from_time >= window.to_time:
        return FieldError(field="from_time", message=TIME_ORDER_MESSAGE)
    return None


def weekday_label(weekday: int) -> str:
    if not (0 <= weekday <= 6):
        raise ValueError("weekday must be between 0 (Sun) and 6 (Sat)")
    return WEEKDAY_LABELS[weekday]
