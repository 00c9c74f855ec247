import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from .config import PathURLEntry
from .errors import ConfigParseError, ConfigReadError
from .resolver import MapStage, ResolverStage, build_mapping

Source = bytes | str | os.PathLike


class RedirectsDocument(BaseModel):
    """JSON redirects file: {"redirects": [{"path": ..., "url": ...}]}"""
    redirects: list[PathURLEntry] = Field(default_factory=list)

    @field_validator("redirects", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value


_entries = TypeAdapter(list[PathURLEntry])


def read_config_file(path: str | os.PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or exc
        raise ConfigReadError(str(path), f"cannot read redirects file ({reason})") from exc


def _load(source: Source) -> tuple[str, bytes]:
    if isinstance(source, bytes):
        return "<bytes>", source
    return str(source), read_config_file(source)


def parse_yaml_entries(content: bytes, source: str = "<bytes>") -> list[PathURLEntry]:
    """
    Parse a YAML redirects document.

    Expected format:

        - path: /some-path
          url: https://www.some-url.com/demo
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigParseError(source, f"invalid YAML: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigParseError(source, "expected a top-level list of {path, url} entries")

    try:
        return _entries.validate_python(data)
    except ValidationError as exc:
        raise ConfigParseError(source, f"invalid redirect entry:\n{exc}") from exc


def parse_json_entries(content: bytes, source: str = "<bytes>") -> list[PathURLEntry]:
    try:
        return RedirectsDocument.model_validate_json(content).redirects
    except ValidationError as exc:
        raise ConfigParseError(source, f"invalid JSON redirects document:\n{exc}") from exc


def build_yaml_stage(source: Source, fallback: ResolverStage) -> MapStage:
    """
    Build a stage from YAML redirects. `source` is the raw file content
    (bytes) or a path to the file.
    :raises ConfigReadError: the file cannot be read
    :raises ConfigParseError: the content is not a valid redirects list
    """
    name, content = _load(source)
    return MapStage(build_mapping(parse_yaml_entries(content, name)), fallback)


def build_json_stage(source: Source, fallback: ResolverStage) -> MapStage:
    """Same as build_yaml_stage, for the JSON {"redirects": [...]} format."""
    name, content = _load(source)
    return MapStage(build_mapping(parse_json_entries(content, name)), fallback)
