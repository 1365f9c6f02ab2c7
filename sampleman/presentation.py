"""
Status presentation — human labels and badge styles.

Purely cosmetic: maps status values to what list and detail pages show.
Accepts display statuses as well as raw order/manufacturer statuses,
since list pages mix both.

Usage:
    from sampleman.presentation import status_badge

    badge = status_badge(DisplayStatus.READY_TO_SHIP)
    badge.label         # "Ready To Ship"
    badge.style.border  # "border-indigo-400"
    badge.style.bg      # "bg-indigo-50"
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusStyle:
    """CSS classes for a status badge."""

    border: str
    text: str
    bg: str = ""


@dataclass(frozen=True)
class StatusBadge:
    """Status value with its label and style."""

    value: str
    label: str
    style: StatusStyle


DEFAULT_STYLE = StatusStyle(border="border-neutral-300", text="text-neutral-500", bg="bg-neutral-100")

_YELLOW = StatusStyle(border="border-yellow-400", text="text-yellow-600", bg="bg-yellow-50")
_PURPLE = StatusStyle(border="border-purple-400", text="text-purple-600", bg="bg-purple-50")
_BLUE = StatusStyle(border="border-blue-400", text="text-blue-600", bg="bg-blue-50")
_CYAN = StatusStyle(border="border-cyan-400", text="text-cyan-600", bg="bg-cyan-50")
_TEAL = StatusStyle(border="border-teal-400", text="text-teal-600", bg="bg-teal-50")
_SLATE = StatusStyle(border="border-slate-300", text="text-slate-500", bg="bg-slate-100")

STATUS_STYLES: dict[str, StatusStyle] = {
    "draft": DEFAULT_STYLE,
    "sourcing": _YELLOW,
    "quoted": _YELLOW,
    "review": _YELLOW,
    "pending": _YELLOW,
    "approved": StatusStyle(border="border-emerald-400", text="text-emerald-600", bg="bg-emerald-50"),
    "invoiced": _PURPLE,
    "paid": _PURPLE,
    "submitted": _BLUE,
    "confirmed": _BLUE,
    "in_production": StatusStyle(border="border-orange-400", text="text-orange-600", bg="bg-orange-50"),
    "ready_to_ship": StatusStyle(border="border-indigo-400", text="text-indigo-600", bg="bg-indigo-50"),
    "partial_shipped": _CYAN,
    "shipped": _CYAN,
    "partial_delivery": _TEAL,
    "delivered": _TEAL,
    "completed": StatusStyle(border="border-green-400", text="text-green-600", bg="bg-green-50"),
    "issue": StatusStyle(border="border-red-400", text="text-red-600", bg="bg-red-50"),
    "cancelled": _SLATE,
    "on_hold": _SLATE,
}


def format_status(status: str | None) -> str:
    """
    Human label for a status value.

    Args:
        status: Snake-case status (e.g., "ready_to_ship")

    Returns:
        Label with each word's first letter upper-cased (e.g., "Ready To Ship");
        "Draft" when empty
    """
    if not status:
        return "Draft"
    return " ".join(word[:1].upper() + word[1:] for word in str(status).split("_"))


def get_status_style(status: str | None) -> StatusStyle:
    """Badge style for a status, neutral when unknown."""
    return STATUS_STYLES.get(str(status) if status else "draft", DEFAULT_STYLE)


def status_badge(status: str | None) -> StatusBadge:
    """Label and style for a status."""
    return StatusBadge(
        value=str(status) if status else "draft",
        label=format_status(status),
        style=get_status_style(status),
    )
