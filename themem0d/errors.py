class ThemeM0dError(Exception):
    """Base class for every error raised by themem0d."""


class ConfigurationError(ThemeM0dError):
    """A monitor's palette cannot produce a theme (too few candidate colors)."""


class TemplateRenderError(ThemeM0dError):
    """A template failed to parse or render."""


class ThemeFileError(ThemeM0dError):
    """The persisted monitor theme file is missing or malformed."""
