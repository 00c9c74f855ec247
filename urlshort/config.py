from os import getenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PathURLEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = ""
    url: str = ""

    @field_validator("path", "url", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # `url:` with no value loads as None from YAML
        return "" if value is None else value


class Settings(BaseModel):
    redirects: list[PathURLEntry] = Field(default_factory=list)
    yaml_path: str | None = None
    json_path: str | None = None

    @classmethod
    def from_env(cls, base: "Settings | None" = None) -> "Settings":
        """Overlay the optional redirect file paths from the environment."""
        base = base or settings
        return base.model_copy(update={
            "yaml_path": getenv("URLSHORT_YAML") or base.yaml_path,
            "json_path": getenv("URLSHORT_JSON") or base.json_path,
        })


# default in-memory config
settings = Settings(
    redirects=[
        PathURLEntry(path="/urlshort-godoc", url="https://godoc.org/github.com/gophercises/urlshort"),
        PathURLEntry(path="/yaml-godoc", url="https://godoc.org/gopkg.in/yaml.v2"),
    ]
)
