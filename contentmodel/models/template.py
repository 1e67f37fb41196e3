# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import Any, Protocol, override, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class TemplateProtocol(Protocol):
    """What the content model needs from a template: its identifier. Templates are resolved elsewhere."""

    @property
    def id(self) -> int: ...


class Template(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(description="Identifier of the template.")
    alias: str | None = Field(default=None, description="Alias of the template.")
    name: str | None = Field(default=None, description="Display name of the template.")

    @override
    def __str__(self) -> str:
        return f"Template({self.alias if self.alias is not None else self.id})"


def validate_template(value: Any) -> Any:
    if not isinstance(value, TemplateProtocol):
        msg = f"Expected a template exposing an 'id', got {type(value).__name__}"
        raise ValueError(msg)  # noqa: TRY004 as pydantic only converts ValueError into ValidationError
    return value
