import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from .config import ThemeConfig
from .errors import ConfigurationError, ThemeFileError
from .export import create_html_preview, export_theme_json, generate_contrast_report
from .log_config import setup_logging
from .palette import build_theme, load_monitor_themes
from .render import build_templates, list_template_files, output_name

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="themem0d",
        description="Build cohesive themes across your system from your wallpaper palettes",
    )
    parser.add_argument(
        "--home",
        metavar="DIR",
        default=None,
        help="Home directory holding Templates/ThemeM0d (default: $HOME)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug diagnostics",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser(
        "build",
        help="Fill the templates with theme data for every monitor",
    )
    build.add_argument("--theme-file", metavar="FILE", help="Monitor palette file")
    build.add_argument("--templates", metavar="DIR", help="Template directory")
    build.add_argument("--output", "-o", metavar="DIR", help="Output directory for rendered themes")
    build.add_argument(
        "--clean",
        action="store_true",
        help="Remove the output directory before building",
    )
    build.set_defaults(handler=_run_build)

    export = subparsers.add_parser(
        "export",
        help="Export each monitor's theme as JSON plus a contrast report",
    )
    export.add_argument("--theme-file", metavar="FILE", help="Monitor palette file")
    export.add_argument("--output", "-o", metavar="DIR", help="Output directory (default: Themes dir)")
    export.set_defaults(handler=_run_export)

    preview = subparsers.add_parser(
        "preview",
        help="Write an HTML preview of every monitor's theme",
    )
    preview.add_argument("--theme-file", metavar="FILE", help="Monitor palette file")
    preview.add_argument("--output", "-o", metavar="FILE", help="HTML file (default: Themes/preview.html)")
    preview.set_defaults(handler=_run_preview)

    templates = subparsers.add_parser(
        "templates",
        help="List the template files that build will render",
    )
    templates.add_argument("--templates", metavar="DIR", help="Template directory")
    templates.set_defaults(handler=_run_templates)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    config = ThemeConfig.from_env(
        home=args.home,
        theme_file=getattr(args, "theme_file", None),
        templates_dir=getattr(args, "templates", None),
    )
    try:
        return args.handler(args, config)
    except ThemeFileError as e:
        logger.error("%s", e)
        return 1


def _load_monitors(config):
    if not config.theme_file.exists():
        print(f"\nISSUE: Theme file not found: {config.theme_file}")
        print("FIX: Generate the monitor palette file first, then run this command again.")
        return None
    return load_monitor_themes(config.theme_file)


def _run_build(args, config):
    """Render every template for every monitor."""
    if args.output:
        config = replace(config, themes_dir=Path(args.output))

    monitors = _load_monitors(config)
    if monitors is None:
        return 1

    if not config.templates_dir.is_dir():
        logger.error("Templates directory not found: %s", config.templates_dir)
        return 1

    print(f"Preparing output directory: {config.themes_dir}")
    result = build_templates(config, monitors, clean=args.clean)

    print("\n" + "=" * 60)
    print(f"Build complete! {len(result.written)} file(s) written to {config.themes_dir}")
    if result.skipped_templates:
        print(f"Skipped templates: {len(result.skipped_templates)}")
        for monitor, template_name in result.skipped_templates:
            print(f"  - {monitor}: {template_name}")
    if result.failed_monitors:
        print(f"Monitors without a theme: {', '.join(result.failed_monitors)}")
    print("=" * 60)

    return 0 if not result.failed_monitors else 1


def _run_export(args, config):
    """Export theme JSON and a contrast report per monitor."""
    monitors = _load_monitors(config)
    if monitors is None:
        return 1

    output_dir = args.output or str(config.themes_dir)
    os.makedirs(output_dir, exist_ok=True)

    exported = []
    failed = []
    for monitor_theme in monitors:
        try:
            theme = build_theme(monitor_theme.colors)
        except ConfigurationError as e:
            logger.error("Cannot build theme for monitor %s: %s", monitor_theme.monitor, e)
            failed.append(monitor_theme.monitor)
            continue

        json_path = os.path.join(output_dir, f"{monitor_theme.monitor}.json")
        report_path = os.path.join(output_dir, f"contrast_report-{monitor_theme.monitor}.txt")

        export_theme_json(
            theme,
            json_path,
            monitor=monitor_theme.monitor,
            source_file=monitor_theme.wallpaper_location,
        )
        report, _ = generate_contrast_report(theme, monitor=monitor_theme.monitor)
        print("\n" + report)
        with open(report_path, "w") as f:
            f.write(report)
        exported.extend([json_path, report_path])

    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print("=" * 60)

    return 0 if not failed else 1


def _run_preview(args, config):
    """Write one HTML page previewing all monitor themes."""
    monitors = _load_monitors(config)
    if monitors is None:
        return 1

    entries = []
    for monitor_theme in monitors:
        try:
            theme = build_theme(monitor_theme.colors)
        except ConfigurationError as e:
            logger.error("Cannot build theme for monitor %s: %s", monitor_theme.monitor, e)
            continue
        entries.append((monitor_theme.monitor, theme, monitor_theme.wallpaper_location))

    output_path = args.output or os.path.join(config.themes_dir, "preview.html")
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    create_html_preview(entries, output_path)
    print(f"Preview written to {output_path}")

    return 0 if len(entries) == len(monitors) else 1


def _run_templates(args, config):
    """List template files and the output name each one renders to."""
    if not config.templates_dir.is_dir():
        logger.error("Templates directory not found: %s", config.templates_dir)
        return 1

    files = list_template_files(config.templates_dir)
    if not files:
        print(f"No templates in {config.templates_dir}")
        return 0

    print(f"Templates in {config.templates_dir}:")
    for path in files:
        print(f"  {path.name:30} -> {output_name(path.name)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
