from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Protocol, Union

from .config import PathURLEntry

PERMANENT_REDIRECT = 308


@dataclass(frozen=True)
class Redirect:
    url: str
    status: int = PERMANENT_REDIRECT


@dataclass(frozen=True)
class Delegate:
    """Hand the path to the stage's fallback."""


DELEGATE = Delegate()


@dataclass(frozen=True)
class Respond:
    content: str
    status_code: int = 200
    media_type: str = "text/plain"


Action = Union[Redirect, Delegate, Respond]
Outcome = Union[Redirect, Respond]


class ResolverStage(Protocol):
    def resolve(self, path: str) -> Action: ...

    def serve(self, path: str) -> Outcome: ...


def build_mapping(entries: Iterable[PathURLEntry]) -> Mapping[str, str]:
    """
    Build a read-only path -> url mapping. Later entries for the same path
    overwrite earlier ones.
    """
    mapping: dict[str, str] = {}
    for entry in entries:
        mapping[entry.path] = entry.url
    return MappingProxyType(mapping)


class MapStage:
    """
    One layer of the redirect chain.

    Paths are matched exactly as received. A path mapped to an empty url is
    treated the same as a missing one and goes to the fallback.
    """
    def __init__(self, mapping: Mapping[str, str], fallback: ResolverStage):
        self.mapping = mapping
        self.fallback = fallback

    def resolve(self, path: str) -> Action:
        url = self.mapping.get(path, "")
        if url:
            return Redirect(url)
        return DELEGATE

    def serve(self, path: str) -> Outcome:
        action = self.resolve(path)
        if isinstance(action, Delegate):
            return self.fallback.serve(path)
        return action


class TerminalStage:
    """Innermost stage: answers every path with the same response."""
    def __init__(self, response: Respond | None = None):
        self.response = response or Respond("Hello, world!\n")

    def resolve(self, path: str) -> Action:
        return self.response

    def serve(self, path: str) -> Outcome:
        return self.response
