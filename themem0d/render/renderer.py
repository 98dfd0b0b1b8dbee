"""Theme template rendering with Jinja2."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Tuple

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError

from ..config import TEMPLATE_SUFFIX
from ..errors import TemplateRenderError
from ..palette.theme import ClassifiedTheme, build_theme
from .helpers import TEMPLATE_HELPERS

logger = logging.getLogger(__name__)


def output_name(template_name: str) -> str:
    """Rendered file name: the template name without its trailing ``.tmpl``."""
    if template_name.endswith(TEMPLATE_SUFFIX):
        return template_name[: -len(TEMPLATE_SUFFIX)]
    return template_name


class TemplateRenderer:
    """Renders theme templates using Jinja2.

    Templates see two variables:
    - ``Monitor``: the monitor name
    - ``Theme``: palettes (``Theme.Primary``...) and derived colors
      (``Theme.Surface``, ``Theme.OnSurface``...)

    ``toHex``, ``toRgba`` and ``tone`` are available both as functions and
    as filters, so ``{{ toHex(tone(Theme.Primary, 80)) }}`` and
    ``{{ Theme.Surface | toRgba("0.9") }}`` are equivalent styles.
    """

    def __init__(self) -> None:
        self.env = Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.env.globals.update(TEMPLATE_HELPERS)
        self.env.filters.update(TEMPLATE_HELPERS)

    def render(
        self,
        theme: ClassifiedTheme,
        monitor: str,
        source: str,
        name: str = "<template>",
    ) -> str:
        """Render one template source against a theme.

        Args:
            theme: Assembled theme for the monitor
            monitor: Monitor identifier exposed as ``Monitor``
            source: Template text
            name: Template name used in error messages

        Returns:
            Rendered text

        Raises:
            TemplateRenderError: On syntax errors, undefined variables or any
                failure while rendering
        """
        variables: dict[str, Any] = {
            "Monitor": monitor,
            "Theme": theme.template_context(),
        }
        try:
            template = self.env.from_string(source)
            return template.render(**variables)

        except TemplateSyntaxError as e:
            raise TemplateRenderError(f"Invalid template syntax in {name} (line {e.lineno}): {e}") from e

        except UndefinedError as e:
            raise TemplateRenderError(f"Undefined value in {name}: {e}") from e

        except Exception as e:
            raise TemplateRenderError(f"Failed to render {name}: {e}") from e

    def render_monitor(self, monitor_theme, templates: Iterable[Tuple[str, str]]) -> dict[str, str]:
        """Build the monitor's theme and render every template against it.

        A template that fails to render is logged and left out of the result;
        the remaining templates are still rendered.

        Args:
            monitor_theme: MonitorTheme with the candidate palette
            templates: ``(template_name, source)`` pairs

        Returns:
            dict mapping output file name to rendered text

        Raises:
            ConfigurationError: If the monitor's palette has too few colors
        """
        theme = build_theme(monitor_theme.colors)

        rendered = {}
        for template_name, source in templates:
            try:
                rendered[output_name(template_name)] = self.render(
                    theme, monitor_theme.monitor, source, name=template_name
                )
            except TemplateRenderError as e:
                logger.error("Skipping template %s for monitor %s: %s", template_name, monitor_theme.monitor, e)
        return rendered
