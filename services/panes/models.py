"""
Panes — Pydantic Models (selection state tree)

Category → EntityList → DetailRecord → AdminList
ComboName → ComboState (active item + filtered candidates)

Every record is rebuilt per request from the request's own parameters.
Nothing here is stored between requests.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════

class Category(str, Enum):
    OWNER = "owner"
    USER = "user"
    VISIBLE = "visible"
    SEARCH = "search"

    @classmethod
    def parse(cls, key: str) -> Optional["Category"]:
        """Return the category for `key`, or None for an unknown key."""
        try:
            return cls(key)
        except ValueError:
            return None


class ComboName(str, Enum):
    OWNER = "Owner"
    HISTORY = "Stand"

    @classmethod
    def parse(cls, name: str) -> Optional["ComboName"]:
        try:
            return cls(name)
        except ValueError:
            return None


class InteractionKind(str, Enum):
    INITIAL_LOAD = "initial_load"
    CATEGORY_CHANGE = "category_change"
    ENTITY_SELECTION = "entity_selection"
    VISIBILITY_TOGGLE = "visibility_toggle"
    ADMIN_EXPANSION = "admin_expansion"
    COMBO_SHOW = "combo_show"
    COMBO_HIDE = "combo_hide"
    COMBO_SET = "combo_set"
    COMBO_RESET = "combo_reset"


class SwapMode(str, Enum):
    INPLACE = "inplace"    # replaces the region the trigger targets
    OOB = "oob"            # carries its own id, merged independently


# ═══════════════════════════════════════════════════════════
# DERIVED RECORDS
# ═══════════════════════════════════════════════════════════

class SubRecord(BaseModel):
    """Host-like entry synthesized from a service name and an index."""
    model_config = ConfigDict(frozen=True)

    name: str
    address: str
    owner: str


class DetailRecord(BaseModel):
    """Full dependent record of one service.

    `owner` is a display label. `u_owner` is the owning identity used to
    derive `admins`; the two are never interchangeable.
    """
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    owner: str = ""
    query_params: str = ""
    show_users: str = ""          # "on" | "off" | "" (client decides)
    users: tuple[SubRecord, ...] = ()
    u_owner: str = ""
    admins: tuple[str, ...] = ()


class AdminList(BaseModel):
    model_config = ConfigDict(frozen=True)

    u_owner: str = ""
    admins: tuple[str, ...] = ()


class ServiceList(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_type: str = ""
    services: tuple[str, ...] = ()


class ComboState(BaseModel):
    """A combo widget's state within one request/response cycle."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    active_item: str = ""
    items: tuple[str, ...] = ()


class HiddenValue(BaseModel):
    """A canonical value echoed to the client as a hidden input."""
    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""


class IndexPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    history_combo: ComboState
    owner_combo: ComboState
    service_list: ServiceList
    details: DetailRecord
    categories: tuple[str, ...] = tuple(c.value for c in Category)
    htmx_script_url: str = ""
    bootstrap_css_url: str = ""


# ═══════════════════════════════════════════════════════════
# REQUEST
# ═══════════════════════════════════════════════════════════

class RequestParams(BaseModel):
    """Selection parameters carried by one request (path + query)."""
    model_config = ConfigDict(frozen=True)

    kind: InteractionKind
    category: str = ""
    service: str = ""
    show_users: str = ""
    state: str = ""
    owner: str = ""
    combo_name: str = ""
    active_item: str = ""
    search: str = ""
    selected: str = ""
    query_params: str = ""
