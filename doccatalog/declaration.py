"""Exported declarations found by a source scanner."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """One exported symbol and the raw text pieces needed to document it."""

    kind: str  # function/const/interface/type
    name: str
    line: int
    doc: str | None = None  # raw /** ... */ text, None when undocumented
    type_params: str | None = None  # "<T, K extends keyof T>"
    params_text: str | None = None  # text between the parentheses
    return_type: str | None = None
    value: str | None = None  # const initializer
    definition: str | None = None  # interface/type text without "export"
    body: str | None = None  # interface members between the braces

    @property
    def documented(self) -> bool:
        return self.doc is not None
