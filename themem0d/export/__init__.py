from .json_export import export_theme_json, theme_to_dict
from .preview import create_html_preview
from .report import generate_contrast_report

__all__ = [
    "create_html_preview",
    "export_theme_json",
    "generate_contrast_report",
    "theme_to_dict",
]
