"""
Parsed document model.

A document is a list of Nodes. Each Node owns its Rules and child Nodes;
the ancestor selector is never stored, it is passed down while rendering.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Selector(BaseModel):
    """Selector text exactly as written, e.g. 'a:hover' or 'h1,h2'."""
    model_config = ConfigDict(frozen=True)

    text: str


class Rule(BaseModel):
    """One property with its value words (rendered space-joined)."""
    model_config = ConfigDict(frozen=True)

    property: str
    value: Tuple[str, ...] = Field(min_length=1)


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    selector: Selector
    rules: Tuple[Rule, ...] = ()
    children: Tuple["Node", ...] = ()


Node.model_rebuild()


class Diagnostic(BaseModel):
    """Why a top-level group was dropped by the lenient parser."""
    group_index: int
    reason: str
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self):
        where = f" (line {self.line}, column {self.column})" if self.line else ""
        return f"group {self.group_index} dropped: {self.reason}{where}"


class ParseResult(BaseModel):
    nodes: Tuple[Node, ...] = ()
    diagnostics: Tuple[Diagnostic, ...] = ()
