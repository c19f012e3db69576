"""Discovery of root module directories and filtering of scan results."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TextIO

from tfguard.rule import Result

ResultsFilter = Callable[[list[Result]], list[Result]]

_DEBUG_PREFIX = "[debug:scan] "
_MODULE_SUFFIXES = (".tf", ".tf.json")


@dataclass
class ScannerOptions:
    """Settings that control how a scan discovers directories and filters results."""

    config_file: str = ""
    custom_check_dir: str = ""
    debug_writer: TextIO | None = None
    include_passed: bool = False
    include_ignored: bool = False
    exclude_rules: list[str] = field(default_factory=list)
    include_rules: list[str] = field(default_factory=list)
    stop_on_rule_errors: bool = False
    workspace_name: str = ""
    single_thread: bool = False
    force_all_dirs: bool = False
    tfvars_paths: list[str] = field(default_factory=list)
    stop_on_hcl_error: bool = False
    skip_downloaded: bool = False
    exclude_paths: list[str] = field(default_factory=list)
    include_only_results: list[str] | None = None


def _is_within(child: str, parent: str) -> bool:
    """True if child lies at or below parent; mixed absolute/relative never match."""
    if os.path.isabs(child) != os.path.isabs(parent):
        return False
    try:
        rel = os.path.relpath(child, parent)
    except ValueError:
        return False
    return not rel.startswith("..")


def is_root_module(dir: str) -> bool:
    """True if the directory directly holds any configuration file."""
    try:
        names = os.listdir(dir)
    except OSError:
        return False
    return any(name.endswith(_MODULE_SUFFIXES) for name in names)


def remove_nested_dirs(dirs: Iterable[str]) -> list[str]:
    """Drop every directory that lies inside another directory of the list."""
    dirs = list(dirs)
    return [
        dir_a
        for dir_a in dirs
        if not any(dir_a != dir_b and _is_within(dir_a, dir_b) for dir_b in dirs)
    ]


def skip_downloaded_filter(results: Iterable[Result]) -> list[Result]:
    """Drop results without a location and those inside downloaded modules."""
    search = f"{os.sep}.terraform{os.sep}"
    return [
        result
        for result in results
        if result.filename is not None and search not in result.filename
    ]


def exclude_paths_filter(paths: Iterable[str]) -> ResultsFilter:
    """Build a filter dropping results located under any of the given paths."""
    excluded = list(paths)

    def _filter(results: Iterable[Result]) -> list[Result]:
        return [
            result
            for result in results
            if result.filename is not None
            and not any(_is_within(result.filename, path) for path in excluded)
        ]

    return _filter


def include_only_results_filter(ids: Iterable[str]) -> ResultsFilter:
    """Build a filter keeping only results of rules with the given long ids."""
    wanted = list(ids)

    def _filter(results: Iterable[Result]) -> list[Result]:
        return [
            result
            for result in results
            for rule_id in wanted
            if result.rule is not None and result.rule.long_id() == rule_id
        ]

    return _filter


class Scanner:
    """Collects paths to scan, finds their root modules and filters results."""

    def __init__(self, options: ScannerOptions | None = None) -> None:
        self.options = options if options is not None else ScannerOptions()
        self._dirs: set[str] = set()

    @property
    def dirs(self) -> list[str]:
        """Directories added so far, sorted."""
        return sorted(self._dirs)

    def _debug(self, message: str) -> None:
        writer = self.options.debug_writer
        if writer is not None:
            writer.write(f"{_DEBUG_PREFIX}{message}\n")

    def add_path(self, path: str) -> None:
        """Add a directory, or the directory holding a file, to the scan."""
        path = os.path.normpath(os.path.abspath(path))
        if os.path.isdir(path):
            self._dirs.add(path)
        elif os.path.exists(path):
            self._dirs.add(os.path.dirname(path))
        else:
            raise FileNotFoundError(f"no such file or directory: {path}")

    def root_modules(self) -> list[str]:
        """Directories that directly hold configuration and have no such parent."""
        simplified = remove_nested_dirs(self.dirs)
        roots = self._find_root_modules(simplified)
        self._debug(f"Found {len(roots)} root module directories.")
        return roots

    def _find_root_modules(self, dirs: list[str]) -> list[str]:
        roots: list[str] = []
        others: list[str] = []
        for dir in dirs:
            if is_root_module(dir):
                roots.append(dir)
                continue
            try:
                entries = sorted(os.scandir(dir), key=lambda entry: entry.name)
            except OSError:
                continue
            others.extend(
                os.path.join(dir, entry.name) for entry in entries if entry.is_dir()
            )

        if (not roots or self.options.force_all_dirs) and others:
            roots.extend(self._find_root_modules(others))

        return remove_nested_dirs(roots)

    def _filters(self) -> list[ResultsFilter]:
        filters: list[ResultsFilter] = []
        if self.options.skip_downloaded:
            filters.append(skip_downloaded_filter)
        if self.options.exclude_paths:
            filters.append(exclude_paths_filter(self.options.exclude_paths))
        if self.options.include_only_results is not None:
            filters.append(include_only_results_filter(self.options.include_only_results))
        return filters

    def filter_results(self, results: Iterable[Result]) -> list[Result]:
        """Apply the configured result filters in turn."""
        filtered = list(results)
        for result_filter in self._filters():
            filtered = result_filter(filtered)
        return filtered