"""
Panes — Standalone Server

Boots the UI server from a single Python command:
  python run.py

Starts:
  - FastAPI app on APP_PORT (default 8080)
  - No database, no session store: every request carries its own state
  - Serves the service browser at /

Usage:
  pip install -e .
  python run.py
"""
import os
import sys

project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(project_root, "services"))

if __name__ == "__main__":
    import uvicorn

    from panes.config import get_settings

    settings = get_settings()
    print("=" * 60)
    print("  PANES — Cascading Selection UI")
    print("=" * 60)
    print(f"  UI:       http://localhost:{settings.APP_PORT}/")
    print(f"  Health:   http://localhost:{settings.APP_PORT}/health")
    print(f"  Metrics:  http://localhost:{settings.APP_PORT}/metrics")
    print("=" * 60)

    uvicorn.run(
        "panes.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.APP_ENV == "development",
        reload_dirs=[os.path.join(project_root, "services", "panes")],
    )
