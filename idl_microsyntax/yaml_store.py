"""YAML loading for document indexes.

A document index file holds up to three top-level lists::

    definitions:
      - {text: "[[state]]", type: PaymentState}
    variables:
      - {text: request, type: PaymentRequest}
    sections:
      - id: sec-show
        variables:
          - {text: details, type: PaymentDetails}
        sections: []

A directory is loaded by concatenating the lists of every ``*.yml`` and
``*.yaml`` file beneath it, in sorted path order.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .resolver import DocumentIndex

logger = logging.getLogger(__name__)

INDEX_KEYS = ("definitions", "variables", "sections")


class YamlStore:
    def __init__(self, root: str | Path):
        self.root = Path(root).expanduser().resolve()

    # Discovery ---------------------------------------------------------------
    def yaml_files(self) -> list[Path]:
        if self.root.is_file():
            return [self.root]
        return sorted(list(self.root.rglob("*.yml")) + list(self.root.rglob("*.yaml")))

    # Load --------------------------------------------------------------------
    def load_file(self, path: Path) -> DocumentIndex:
        """Load and validate a single index file; errors name ``path``."""
        try:
            with open(path, encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML\n{e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        unknown = set(data) - set(INDEX_KEYS)
        if unknown:
            raise ValueError(f"{path}: unknown keys {sorted(unknown)}")
        # An empty key (`definitions:`) reads as None.
        data = {key: value for key, value in data.items() if value is not None}
        try:
            index = DocumentIndex.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"{path}: invalid document index\n{e}") from e
        logger.debug("Loaded index file %s", path)
        return index

    def load(self) -> DocumentIndex:
        merged = DocumentIndex()
        for f in self.yaml_files():
            index = self.load_file(f)
            merged.definitions.extend(index.definitions)
            merged.variables.extend(index.variables)
            merged.sections.extend(index.sections)
        return merged


def load_index(path: str | Path) -> DocumentIndex:
    """Load a :class:`DocumentIndex` from a YAML file or directory."""
    return YamlStore(path).load()


__all__ = ["YamlStore", "load_index"]
