"""
Panes — cascading selection UI served as htmx fragments.
"""
__version__ = "1.0.0"
