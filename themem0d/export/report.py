from ..color import contrast_ratio

MIN_TEXT_CONTRAST = 4.5  # on_surface against surfaces
MIN_DIM_CONTRAST = 3.0  # on_surface_variant against surfaces


def generate_contrast_report(theme, monitor=None):
    """Generate a readability report for the derived text/surface pairs

    Returns:
        tuple: (report text, list of (role, hex, achieved, required) failures)
    """
    surface = theme.surface
    surface_variant = theme.surface_variant

    report = []
    report.append("=" * 70)
    report.append("CONTRAST REPORT")
    report.append("=" * 70)
    if monitor:
        report.append(f"Monitor: {monitor}")
    report.append(f"Surface:          {surface.hex}")
    report.append(f"Surface Variant:  {surface_variant.hex}")
    report.append("")

    checks = [
        ("on_surface", theme.on_surface, MIN_TEXT_CONTRAST),
        ("on_surface_variant", theme.on_surface_variant, MIN_DIM_CONTRAST),
        ("primary_fixed", theme.primary_fixed, MIN_TEXT_CONTRAST),
    ]

    issues = []
    for key, color, min_contrast in checks:
        cr_surface = contrast_ratio(color.luminance, surface.luminance)
        cr_variant = contrast_ratio(color.luminance, surface_variant.luminance)
        min_cr = min(cr_surface, cr_variant)

        status = "✓" if min_cr >= min_contrast else "✗ FAIL"
        if min_cr < min_contrast:
            issues.append((key, color.hex, min_cr, min_contrast))

        report.append(
            f"  {key:20} {color.hex}  vs surface: {cr_surface:4.1f}:1  "
            f"vs variant: {cr_variant:4.1f}:1  (min {min_contrast}:1) {status}"
        )

    # Text on the fixed primary container
    cr_fixed = contrast_ratio(theme.on_primary_fixed.luminance, theme.primary_fixed.luminance)
    status = "✓" if cr_fixed >= MIN_TEXT_CONTRAST else "✗ FAIL"
    if cr_fixed < MIN_TEXT_CONTRAST:
        issues.append(("on_primary_fixed", theme.on_primary_fixed.hex, cr_fixed, MIN_TEXT_CONTRAST))
    report.append(
        f"  {'on_primary_fixed':20} {theme.on_primary_fixed.hex}  "
        f"vs primary_fixed: {cr_fixed:4.1f}:1  (min {MIN_TEXT_CONTRAST}:1) {status}"
    )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for key, hex_val, achieved, required in issues:
            report.append(f"  - {key}: {hex_val} has {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues
