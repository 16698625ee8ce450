"""
Panes — Prometheus Metrics

Exposes /metrics endpoint for observability.
Tracks request volume/latency, interactions and rendered fragments.
"""
from prometheus_client import (
    Counter, Histogram, Info,
    generate_latest, CONTENT_TYPE_LATEST
)
from fastapi import APIRouter, Response

from panes import __version__

router = APIRouter()

# ═══════════════════════════════════════════════════════════
# COUNTERS
# ═══════════════════════════════════════════════════════════

api_requests = Counter(
    "panes_api_requests_total",
    "Total API requests",
    ["method", "path", "status"]
)

interactions = Counter(
    "panes_interactions_total",
    "Interactions reconstructed, by kind",
    ["kind"]
)

fragments_rendered = Counter(
    "panes_fragments_rendered_total",
    "Fragments rendered, by template and swap mode",
    ["template", "swap"]
)

render_failures = Counter(
    "panes_render_failures_total",
    "Fragments that failed to render",
    ["template"]
)

# ═══════════════════════════════════════════════════════════
# HISTOGRAMS
# ═══════════════════════════════════════════════════════════

api_request_latency = Histogram(
    "panes_api_request_latency_seconds",
    "API request latency",
    ["method", "path"],
    buckets=[.005, .01, .05, .1, .25, .5, 1, 2.5]
)

# ═══════════════════════════════════════════════════════════
# INFO
# ═══════════════════════════════════════════════════════════

build_info = Info(
    "panes_build",
    "Build information"
)
build_info.info({
    "version": __version__,
    "service": "ui",
})


# ═══════════════════════════════════════════════════════════
# METRICS ENDPOINT
# ═══════════════════════════════════════════════════════════

@router.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
