from .build import BuildResult, build_templates, list_template_files
from .helpers import to_hex, to_rgba, tone
from .renderer import TemplateRenderer, output_name

__all__ = [
    "BuildResult",
    "TemplateRenderer",
    "build_templates",
    "list_template_files",
    "output_name",
    "to_hex",
    "to_rgba",
    "tone",
]
