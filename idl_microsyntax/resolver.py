"""Identifier resolution against the surrounding document.

The renderer only needs two read-only queries, captured by the
:class:`Resolver` protocol:

* ``lookup_declared_type(identifier)``: the type tag of the first declared
  definition whose display text equals ``identifier``.
* ``lookup_variable_type(identifier, context)``: the type tag of the first
  variable whose display text equals ``identifier`` within the structural
  scope enclosing ``context``.

:class:`DocumentIndex` is an in-memory implementation over definition and
variable records grouped into nested sections. Its context anchor is a
section id; an unknown id falls back to the whole document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


@runtime_checkable
class Resolver(Protocol):
    def lookup_declared_type(self, identifier: str) -> str | None: ...

    def lookup_variable_type(
        self, identifier: str, context: str | None
    ) -> str | None: ...


class Definition(BaseModel):
    """A declared definition (display text plus its type tag)."""

    model_config = ConfigDict(extra="forbid")

    text: str
    type: str


class Variable(BaseModel):
    """A typed variable mentioned in prose."""

    model_config = ConfigDict(extra="forbid")

    text: str
    type: str


class Section(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    variables: list[Variable] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list)

    def iter_sections(self) -> Iterator[Section]:
        """Yield this section and its descendants depth-first."""
        yield self
        for child in self.sections:
            yield from child.iter_sections()

    def iter_variables(self) -> Iterator[Variable]:
        """Yield variables in document order: own first, then nested sections."""
        for section in self.iter_sections():
            yield from section.variables


def _first_type(
    candidates: Iterable[Definition | Variable], identifier: str
) -> str | None:
    for candidate in candidates:
        if candidate.text.strip() == identifier:
            return candidate.type
    return None


class DocumentIndex(BaseModel):
    """Read-only index of definitions and sectioned variables of a document."""

    model_config = ConfigDict(extra="forbid")

    definitions: list[Definition] = Field(default_factory=list)
    variables: list[Variable] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list)

    def iter_sections(self) -> Iterator[Section]:
        for section in self.sections:
            yield from section.iter_sections()

    def iter_variables(self) -> Iterator[Variable]:
        yield from self.variables
        for section in self.sections:
            yield from section.iter_variables()

    def find_section(self, section_id: str) -> Section | None:
        for section in self.iter_sections():
            if section.id == section_id:
                return section
        return None

    def scope_variables(self, context: str) -> Iterator[Variable]:
        """Variables visible from ``context``: its section, else the whole document."""
        section = self.find_section(context)
        if section is None:
            logger.debug("No section '%s'; using document scope", context)
            return self.iter_variables()
        return section.iter_variables()

    # Resolver protocol ---------------------------------------------------
    def lookup_declared_type(self, identifier: str) -> str | None:
        found = _first_type(self.definitions, identifier)
        if found is None:
            logger.debug("No declared definition for '%s'", identifier)
        return found

    def lookup_variable_type(
        self, identifier: str, context: str | None
    ) -> str | None:
        if context is None:
            return None
        found = _first_type(self.scope_variables(context), identifier)
        if found is None:
            logger.debug("No variable '%s' in scope '%s'", identifier, context)
        return found


__all__ = [
    "Definition",
    "DocumentIndex",
    "Resolver",
    "Section",
    "Variable",
]
