"""
Panes — FastAPI Application

Stateless htmx server: every request carries its own selection state,
the server reconstructs it, renders the affected fragments and forgets.
"""
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from panes import __version__
from panes.config import get_settings
from panes.log import get_logger
from panes.metrics import api_request_latency, api_requests
from panes.metrics import router as metrics_router
from panes.render import FragmentRenderer, FragmentRenderError, build_environment
from panes.routers import health, ui

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup — parse the template set once and share it read-only."""
    settings = get_settings()
    logger.info("panes.starting", env=settings.APP_ENV, default_category=settings.DEFAULT_CATEGORY)
    app.state.renderer = FragmentRenderer(build_environment())
    logger.info("panes.ready")
    yield
    logger.info("panes.shutdown")


app = FastAPI(
    title="Panes — Cascading Selection UI",
    description="Service → details → owner → admins, rendered as htmx fragments",
    version=__version__,
    lifespan=lifespan,
)


@app.middleware("http")
async def track_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    dur = time.perf_counter() - start
    path = getattr(request.scope.get("route"), "path", "unmatched")
    api_requests.labels(method=request.method, path=path, status=str(response.status_code)).inc()
    api_request_latency.labels(method=request.method, path=path).observe(dur)
    return response


@app.exception_handler(FragmentRenderError)
async def fragment_render_failed(request: Request, exc: FragmentRenderError):
    logger.error(
        "request.aborted",
        path=request.url.path,
        template=exc.fragment.template,
        error=str(exc.cause),
    )
    return PlainTextResponse("Internal Server Error", status_code=500)


# ═══════════════════════════════════════════════════════════
# ROUTERS
# ═══════════════════════════════════════════════════════════

app.include_router(ui.router, tags=["UI"])
app.include_router(health.router, tags=["Health"])
app.include_router(metrics_router, tags=["Metrics"])
