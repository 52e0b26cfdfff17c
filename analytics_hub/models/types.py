from typing import Any

from pydantic import BaseModel, Field

ProviderConfig = str | dict[str, Any]
Traits = dict[str, Any]


class PageLocation(BaseModel):
    href: str
    host: str
    port: str = ""
    hash: str = ""
    hostname: str
    pathname: str = "/"
    protocol: str
    search: str = ""
    query: str = ""


class ScriptOptions(BaseModel):
    """Where to load a provider library from.

    ``fragment`` is a protocol-relative URL (``//cdn.example.com/lib.js``);
    ``http`` / ``https`` override it for a specific page protocol.
    """

    fragment: str | None = None
    http: str | None = None
    https: str | None = None
    id: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)


class ScriptTag(BaseModel):
    src: str
    id: str | None = None
    type: str = "text/javascript"
    is_async: bool = True
    attributes: dict[str, str] = Field(default_factory=dict)


class DomEvent(BaseModel):
    type: str = "click"
    meta_key: bool = False
    alt_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False
    which: int | None = None
    button: int | None = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True
