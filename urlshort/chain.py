from .config import Settings
from .loaders import build_json_stage, build_yaml_stage
from .resolver import MapStage, ResolverStage, TerminalStage, build_mapping


def build_chain(settings: Settings, terminal: ResolverStage | None = None) -> ResolverStage:
    """
    Compose the redirect chain innermost-first:
    terminal <- static redirects <- YAML file <- JSON file.
    File errors (ConfigReadError, ConfigParseError) propagate to the caller.
    """
    handler: ResolverStage = MapStage(build_mapping(settings.redirects), terminal or TerminalStage())

    if settings.yaml_path:
        handler = build_yaml_stage(settings.yaml_path, handler)

    if settings.json_path:
        handler = build_json_stage(settings.json_path, handler)

    return handler
