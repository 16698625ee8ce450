"""
Panes — Response Composer

Turns a RenderPlan into the ordered fragments of one htmx response.

Ordering contract:
1. The primary (in-place) fragment comes first.
2. Hidden-state echoes follow, so the client captures the canonical
   values it must send back on the next interaction.
3. Secondary visible panels come last.

Only regions the interaction actually changed get a fragment.
"""
from dataclasses import dataclass
from typing import Any

from panes.models import HiddenValue, InteractionKind, SwapMode
from panes.reconstruct import RenderPlan

# DOM regions
PAGE = "page"
SERVICE_LIST = "service-list"
SERVICE_DETAILS = "service-details"
ADMINS = "admins"
SELECTED_SERVICE = "service"


def combo_region(name: str) -> str:
    return f"combo-{name}"


def menu_region(name: str) -> str:
    return f"menu-{name}"


@dataclass(frozen=True)
class Fragment:
    template: str
    target: str
    swap: SwapMode
    payload: Any

    @property
    def oob(self) -> bool:
        return self.swap is SwapMode.OOB


def _primary(template: str, target: str, payload: Any) -> Fragment:
    return Fragment(template, target, SwapMode.INPLACE, payload)


def _echo(name: str, value: str) -> Fragment:
    return Fragment("hidden", name, SwapMode.OOB, HiddenValue(name=name, value=value))


def compose(plan: RenderPlan) -> list[Fragment]:
    """Ordered (template, target, swap, payload) fragments for a plan."""
    kind = plan.kind

    if kind is InteractionKind.INITIAL_LOAD:
        return [_primary("index", PAGE, plan.index)]

    if kind is InteractionKind.CATEGORY_CHANGE:
        return [
            _primary("service_list", SERVICE_LIST, plan.service_list),
            _echo(SELECTED_SERVICE, plan.selected_service),
            Fragment("service_details", SERVICE_DETAILS, SwapMode.OOB, plan.details),
        ]

    if kind is InteractionKind.ENTITY_SELECTION:
        return [
            _primary("service_details", SERVICE_DETAILS, plan.details),
            _echo(SELECTED_SERVICE, plan.selected_service),
        ]

    if kind is InteractionKind.VISIBILITY_TOGGLE:
        # The selected service is unchanged; showUsers lives inside the pane.
        return [_primary("service_details", SERVICE_DETAILS, plan.details)]

    if kind is InteractionKind.ADMIN_EXPANSION:
        return [_primary("admins", ADMINS, plan.admins)]

    if kind in (InteractionKind.COMBO_SHOW, InteractionKind.COMBO_HIDE):
        return [_primary("menu", menu_region(plan.combo.name), plan.combo)]

    if kind in (InteractionKind.COMBO_SET, InteractionKind.COMBO_RESET):
        return [_primary("combo", combo_region(plan.combo.name), plan.combo)]

    raise ValueError(f"no composition for interaction {kind!r}")
