"""
Panes — Fragment Renderer

Wraps the jinja2 environment built once at startup. Each fragment is
rendered with three names in scope:

    data    the payload model
    target  the DOM id the fragment owns
    oob     True when the root element must carry hx-swap-oob

Template faults surface as FragmentRenderError and abort the request.
"""
from typing import Iterable

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, select_autoescape

from panes.compose import Fragment
from panes.log import get_logger
from panes.metrics import fragments_rendered, render_failures

logger = get_logger("panes.render")


class FragmentRenderError(RuntimeError):
    """A fragment could not be rendered (missing template, bad payload)."""

    def __init__(self, fragment: Fragment, cause: Exception):
        super().__init__(f"failed to render fragment {fragment.template!r} for #{fragment.target}: {cause}")
        self.fragment = fragment
        self.cause = cause


def build_environment() -> Environment:
    return Environment(
        loader=PackageLoader("panes", "templates"),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class FragmentRenderer:
    def __init__(self, env: Environment):
        self._env = env

    def render(self, fragment: Fragment) -> str:
        try:
            template = self._env.get_template(f"{fragment.template}.html")
            html = template.render(data=fragment.payload, target=fragment.target, oob=fragment.oob)
        except TemplateError as e:
            render_failures.labels(template=fragment.template).inc()
            logger.error("fragment.render_failed", template=fragment.template, target=fragment.target, error=str(e))
            raise FragmentRenderError(fragment, e) from e
        fragments_rendered.labels(template=fragment.template, swap=fragment.swap.value).inc()
        return html

    def render_all(self, fragments: Iterable[Fragment]) -> str:
        """Render every fragment before returning any markup."""
        return "\n".join([self.render(f) for f in fragments])
