class ConfigError(Exception):
    """Base for failures while building a redirect stage from configuration."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


class ConfigReadError(ConfigError):
    """The redirects file could not be opened or read."""


class ConfigParseError(ConfigError):
    """The redirects file is not valid YAML/JSON, or has the wrong shape."""
