import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from ..errors import ConfigurationError
from .renderer import TemplateRenderer, output_name

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """What a build pass produced, per output file and per failure."""

    written: List[Path] = field(default_factory=list)
    skipped_templates: List[Tuple[str, str]] = field(default_factory=list)  # (monitor, template)
    failed_monitors: List[str] = field(default_factory=list)

    @property
    def ok(self):
        return not self.skipped_templates and not self.failed_monitors


def list_template_files(templates_dir):
    """Template files in ``templates_dir``, sorted by name, directories skipped."""
    templates_dir = Path(templates_dir)
    return sorted(p for p in templates_dir.iterdir() if not p.is_dir())


def read_templates(templates_dir):
    """Read every template as ``(name, source)``, logging unreadable files."""
    templates = []
    for path in list_template_files(templates_dir):
        try:
            templates.append((path.name, path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read template file %s: %s", path.name, e)
    return templates


def build_templates(config, monitor_themes, clean=False, renderer=None):
    """Render every template for every monitor into ``config.themes_dir``.

    Output for a monitor goes to ``<themes_dir>/<monitor>/``. A monitor whose
    palette can't be classified gets no directory and no files. A template
    that can't be read, rendered or written is skipped without stopping the
    rest of the build.

    Args:
        config: ThemeConfig with templates_dir and themes_dir
        monitor_themes: MonitorTheme records to build
        clean: Remove themes_dir before writing
        renderer: TemplateRenderer to use (a new one by default)

    Returns:
        BuildResult

    Raises:
        OSError: If the templates directory can't be listed or the output
            directory can't be created
    """
    renderer = renderer or TemplateRenderer()
    result = BuildResult()

    # Unreadable files stay listed so they are reported as skipped
    template_names = [p.name for p in list_template_files(config.templates_dir)]
    templates = read_templates(config.templates_dir)

    themes_dir = Path(config.themes_dir)
    if clean and themes_dir.exists():
        logger.info("Removing previous output in %s", themes_dir)
        shutil.rmtree(themes_dir)
    themes_dir.mkdir(parents=True, exist_ok=True)

    for monitor_theme in monitor_themes:
        monitor = monitor_theme.monitor
        print(f"\nProcessing templates for monitor: {monitor}")

        try:
            rendered = renderer.render_monitor(monitor_theme, templates)
        except ConfigurationError as e:
            logger.error("Cannot build theme for monitor %s: %s", monitor, e)
            result.failed_monitors.append(monitor)
            continue

        monitor_dir = themes_dir / monitor
        try:
            monitor_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Could not create directory for monitor %s: %s", monitor, e)
            result.failed_monitors.append(monitor)
            continue

        for template_name in template_names:
            name = output_name(template_name)
            if name not in rendered:
                result.skipped_templates.append((monitor, template_name))
                continue

            output_path = monitor_dir / name
            print(f"  -> Rendering {template_name}")
            try:
                output_path.write_text(rendered[name], encoding="utf-8")
            except OSError as e:
                logger.error("Failed to write output file %s: %s", output_path, e)
                result.skipped_templates.append((monitor, template_name))
                continue
            result.written.append(output_path)

    return result
