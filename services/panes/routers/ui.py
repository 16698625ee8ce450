"""
Panes — UI Router

Thin htmx surface: each route turns its path/query into RequestParams,
reconstructs the selection state, composes the fragments and renders
them in one go. Handlers are sync so each request runs on the worker pool.
"""
from urllib.parse import unquote

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from panes.compose import compose
from panes.config import Settings, get_settings
from panes.log import get_logger
from panes.metrics import interactions
from panes.models import InteractionKind, RequestParams
from panes.reconstruct import reconstruct
from panes.render import FragmentRenderer

logger = get_logger("panes.ui")
router = APIRouter()


def get_renderer(request: Request) -> FragmentRenderer:
    return request.app.state.renderer


def respond(params: RequestParams, renderer: FragmentRenderer, settings: Settings) -> HTMLResponse:
    plan = reconstruct(params, settings)
    fragments = compose(plan)
    body = renderer.render_all(fragments)
    interactions.labels(kind=params.kind.value).inc()
    logger.info(
        "interaction.composed",
        kind=params.kind.value,
        fragments=[f"{f.template}#{f.target}:{f.swap.value}" for f in fragments],
    )
    return HTMLResponse(body)


def request_uri(request: Request) -> str:
    """Path plus query string, URL-unescaped."""
    uri = request.url.path
    if request.url.query:
        uri += "?" + request.url.query
    return unquote(uri)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    """Full page: default category, first service, default combo items."""
    return respond(RequestParams(kind=InteractionKind.INITIAL_LOAD), renderer, settings)


@router.get("/services/{type}", response_class=HTMLResponse)
@router.get("/serviceList/{type}", response_class=HTMLResponse)
def update_services(
    type: str,
    request: Request,
    show_users: str = Query("", alias="showUsers"),
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    params = RequestParams(
        kind=InteractionKind.CATEGORY_CHANGE,
        category=type,
        show_users=show_users,
        query_params=request_uri(request),
    )
    return respond(params, renderer, settings)


@router.get("/details/{service}", response_class=HTMLResponse)
def update_details(
    service: str,
    show_users: str = Query("", alias="showUsers"),
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    params = RequestParams(kind=InteractionKind.ENTITY_SELECTION, service=service, show_users=show_users)
    return respond(params, renderer, settings)


@router.get("/showUsers/{state}", response_class=HTMLResponse)
def show_users(
    state: str,
    service: str = Query(""),
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    params = RequestParams(kind=InteractionKind.VISIBILITY_TOGGLE, service=service, state=state)
    return respond(params, renderer, settings)


@router.get("/admins/{owner}", response_class=HTMLResponse)
def update_admins(
    owner: str,
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    params = RequestParams(kind=InteractionKind.ADMIN_EXPANSION, owner=owner)
    return respond(params, renderer, settings)


@router.get("/showMenu", response_class=HTMLResponse)
def show_menu(
    name: str = Query("", alias="Name"),
    active_item: str = Query("", alias="ActiveItem"),
    search: str = Query("", alias="Search"),
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    params = RequestParams(
        kind=InteractionKind.COMBO_SHOW,
        combo_name=name,
        active_item=active_item,
        search=search,
    )
    return respond(params, renderer, settings)


@router.get("/hideMenu", response_class=HTMLResponse)
def hide_menu(
    name: str = Query("", alias="Name"),
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    params = RequestParams(kind=InteractionKind.COMBO_HIDE, combo_name=name)
    return respond(params, renderer, settings)


@router.get("/setCombo/{selected}", response_class=HTMLResponse)
def set_combo(
    selected: str,
    name: str = Query("", alias="Name"),
    active_item: str = Query("", alias="ActiveItem"),
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    params = RequestParams(
        kind=InteractionKind.COMBO_SET,
        combo_name=name,
        active_item=active_item,
        selected=selected,
    )
    return respond(params, renderer, settings)


@router.get("/resetCombo", response_class=HTMLResponse)
def reset_combo(
    name: str = Query("", alias="Name"),
    active_item: str = Query("", alias="ActiveItem"),
    renderer: FragmentRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    params = RequestParams(kind=InteractionKind.COMBO_RESET, combo_name=name, active_item=active_item)
    return respond(params, renderer, settings)
