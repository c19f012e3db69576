"""Targeted security rules applied to configuration blocks."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from tfguard.provider import Provider
from tfguard.severity import Severity

MODULE_BLOCK_TYPE = "module"


@dataclass
class RuleMetadata:
    """Descriptive information identifying a rule."""

    provider: Provider | str
    service: str
    short_code: str
    severity: Severity = Severity.NONE
    summary: str = ""
    impact: str = ""
    resolution: str = ""
    explanation: str = ""

    def __post_init__(self) -> None:
        self.provider = Provider(self.provider)

    def long_id(self) -> str:
        """Identifier of the form provider-service-shortcode, lower case."""
        return f"{self.provider.value}-{self.service}-{self.short_code}".lower()


@dataclass
class Block:
    """A configuration block such as a resource or module."""

    block_type: str
    labels: list[str] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)
    filename: str = ""

    @property
    def type_label(self) -> str:
        """The first label, naming the block's kind, or an empty string."""
        return self.labels[0] if self.labels else ""

    @property
    def full_name(self) -> str:
        if self.block_type == "resource":
            return ".".join(self.labels)
        return ".".join([self.block_type, *self.labels])

    def get_attribute(self, name: str) -> Any:
        """Value of the named attribute, or None when absent."""
        return self.attributes.get(name)


@dataclass
class Result:
    """A problem reported by a rule."""

    description: str
    block: Block | None = None
    filename: str | None = None
    rule: RuleMetadata | None = None

    def __post_init__(self) -> None:
        if self.filename is None and self.block is not None:
            self.filename = self.block.filename


CheckFunc = Callable[[Block, Any], Iterable[Result]]


@dataclass
class Rule:
    """A check plus the block types, labels and module sources it targets."""

    metadata: RuleMetadata
    required_types: list[str] = field(default_factory=list)
    required_labels: list[str] = field(default_factory=list)
    required_sources: list[str] = field(default_factory=list)
    check_terraform: CheckFunc | None = None

    def id(self) -> str:
        return self.metadata.long_id()

    def check_against_block(self, block: Block, module: Any) -> list[Result]:
        """Run the check on a block if the rule applies to it."""
        if self.check_terraform is None:
            return []
        if not self.is_required_for_block(block):
            return []
        results = list(self.check_terraform(block, module) or [])
        for result in results:
            result.rule = self.metadata
        return results

    def is_required_for_block(self, block: Block) -> bool:
        """True if the rule should be applied to the given block."""
        if self.required_types and block.block_type not in self.required_types:
            return False
        if self.required_labels and not self._labels_match(block):
            return False
        if self.required_sources and block.block_type == MODULE_BLOCK_TYPE:
            if not self._sources_match(block):
                return False
        return True

    def _labels_match(self, block: Block) -> bool:
        return any(
            label == "*" or (block.labels and wildcard_match(label, block.type_label))
            for label in self.required_labels
        )

    def _sources_match(self, block: Block) -> bool:
        source = block.get_attribute("source")
        if source is None:
            return False
        if isinstance(source, (list, tuple)):
            if not source:
                return False
            source = source[0]
        source_path = str(source)

        if source_path.startswith("."):
            try:
                source_path = clean_path_relative_to_working_dir(
                    os.path.dirname(block.filename), source_path
                )
            except (OSError, ValueError) as exc:
                source_path = ""
                print(
                    f"WARNING: did not clean path for module "
                    f"{block.full_name}:{block.filename} due to error(s): {exc}",
                    file=sys.stderr,
                )

        return any(
            required == "*" or wildcard_match(required, source_path)
            for required in self.required_sources
        )


def clean_path_relative_to_working_dir(dir: str, path: str) -> str:
    """Resolve path against dir and express it relative to the working directory."""
    abs_path = os.path.normpath(os.path.join(dir, path))
    if not os.path.isabs(abs_path):
        raise ValueError(f"can't make {abs_path} relative to the working directory")
    return os.path.relpath(abs_path, os.getcwd())


def wildcard_match(pattern: str, subject: str) -> bool:
    """Match subject against a pattern where '*' stands for any run of characters."""
    if not pattern:
        return False
    parts = pattern.split("*")
    last_index = 0
    for i, part in enumerate(parts):
        if not part:
            continue
        if i == 0 and not subject.startswith(part):
            return False
        if i == len(parts) - 1 and not subject.endswith(part):
            return False
        new_index = subject.find(part)
        if new_index < last_index:
            return False
        last_index = new_index
    return True