"""
Panes — Selection-State Reconstructor

Rebuilds the whole dependent state tree from one request's parameters:

    Category → EntityList → DetailRecord → AdminList
    ComboName → ComboState

The server keeps no memory between requests. Whatever the client echoes
back (selected service, showUsers, active combo item) is the state.
Dependencies are always resolved upstream-first so no payload is built
from a stale intermediate.
"""
from dataclasses import dataclass
from typing import Callable, Optional

from panes.config import Settings, get_settings
from panes.log import get_logger
from panes.models import (
    AdminList,
    Category,
    ComboName,
    ComboState,
    DetailRecord,
    IndexPage,
    InteractionKind,
    RequestParams,
    ServiceList,
)
from panes.resolvers import resolve_admins, resolve_details
from panes.synthetic import category_size, combo_items, list_for

logger = get_logger("panes.reconstruct")


@dataclass(frozen=True)
class RenderPlan:
    """Every payload the fragments of one interaction need."""
    kind: InteractionKind
    index: Optional[IndexPage] = None
    service_list: Optional[ServiceList] = None
    details: Optional[DetailRecord] = None
    admins: Optional[AdminList] = None
    combo: Optional[ComboState] = None

    @property
    def selected_service(self) -> str:
        return self.details.name if self.details else ""


# ─── Shared derivations ──────────────────────────────────────

def service_list_state(category_key: str, settings: Settings) -> tuple[ServiceList, DetailRecord]:
    """EntityList for a category plus its default (first) DetailRecord."""
    category = Category.parse(category_key)
    limit = None
    if settings.SERVICE_LIST_CAP is not None:
        limit = min(settings.SERVICE_LIST_CAP, category_size(category))
    services = list_for(category, limit=limit)

    details = resolve_details(services[0]) if services else DetailRecord()
    details = details.model_copy(update={"show_users": "off"})
    return ServiceList(service_type=category_key, services=services), details


# ─── Interaction handlers ────────────────────────────────────

def _initial_load(params: RequestParams, settings: Settings) -> RenderPlan:
    service_list, details = service_list_state(settings.DEFAULT_CATEGORY, settings)
    index = IndexPage(
        history_combo=ComboState(name=ComboName.HISTORY.value, active_item=settings.DEFAULT_HISTORY_ITEM),
        owner_combo=ComboState(name=ComboName.OWNER.value, active_item=settings.DEFAULT_OWNER_ITEM),
        service_list=service_list,
        details=details,
        htmx_script_url=settings.HTMX_SCRIPT_URL,
        bootstrap_css_url=settings.BOOTSTRAP_CSS_URL,
    )
    return RenderPlan(kind=params.kind, index=index)


def _category_change(params: RequestParams, settings: Settings) -> RenderPlan:
    service_list, details = service_list_state(params.category, settings)
    details = details.model_copy(update={
        "show_users": params.show_users,
        "query_params": params.query_params,
    })
    return RenderPlan(kind=params.kind, service_list=service_list, details=details)


def _entity_selection(params: RequestParams, settings: Settings) -> RenderPlan:
    details = resolve_details(params.service)
    details = details.model_copy(update={"show_users": params.show_users})
    return RenderPlan(kind=params.kind, details=details)


def _visibility_toggle(params: RequestParams, settings: Settings) -> RenderPlan:
    details = resolve_details(params.service)
    details = details.model_copy(update={"show_users": params.state})
    return RenderPlan(kind=params.kind, details=details)


def _admin_expansion(params: RequestParams, settings: Settings) -> RenderPlan:
    admins = AdminList(u_owner=params.owner, admins=resolve_admins(params.owner))
    return RenderPlan(kind=params.kind, admins=admins)


def _combo_show(params: RequestParams, settings: Settings) -> RenderPlan:
    search = params.search
    # Opening on the current value lists everything.
    if search == params.active_item:
        search = ""
    items = combo_items(ComboName.parse(params.combo_name), search, settings)
    combo = ComboState(name=params.combo_name, active_item=params.active_item, items=items)
    return RenderPlan(kind=params.kind, combo=combo)


def _combo_hide(params: RequestParams, settings: Settings) -> RenderPlan:
    # Only the region name survives; every piece of content is cleared.
    return RenderPlan(kind=params.kind, combo=ComboState(name=params.combo_name))


def _combo_set(params: RequestParams, settings: Settings) -> RenderPlan:
    combo = ComboState(name=params.combo_name, active_item=params.selected)
    return RenderPlan(kind=params.kind, combo=combo)


def _combo_reset(params: RequestParams, settings: Settings) -> RenderPlan:
    combo = ComboState(name=params.combo_name, active_item=params.active_item)
    return RenderPlan(kind=params.kind, combo=combo)


HANDLERS: dict[InteractionKind, Callable[[RequestParams, Settings], RenderPlan]] = {
    InteractionKind.INITIAL_LOAD: _initial_load,
    InteractionKind.CATEGORY_CHANGE: _category_change,
    InteractionKind.ENTITY_SELECTION: _entity_selection,
    InteractionKind.VISIBILITY_TOGGLE: _visibility_toggle,
    InteractionKind.ADMIN_EXPANSION: _admin_expansion,
    InteractionKind.COMBO_SHOW: _combo_show,
    InteractionKind.COMBO_HIDE: _combo_hide,
    InteractionKind.COMBO_SET: _combo_set,
    InteractionKind.COMBO_RESET: _combo_reset,
}


def reconstruct(params: RequestParams, settings: Optional[Settings] = None) -> RenderPlan:
    """Derive the RenderPlan for one interaction from its parameters alone."""
    settings = settings or get_settings()
    plan = HANDLERS[params.kind](params, settings)
    logger.debug(
        "state.reconstructed",
        kind=params.kind.value,
        service=plan.selected_service,
    )
    return plan
