#!/usr/bin/env python3
"""
references.py
-------------
Footnote reference consistency checks for markdown documents.

Every in-text marker such as ``[^3]`` must have a definition line such as
``[^3]: Some note.`` somewhere in the same document. This module holds the
pure part of the check: it works on raw text and returns plain data, so it
can be used without touching the filesystem.

Components:
    - extract_references: marker occurrences per id, with line numbers
    - extract_definitions: ids that have a valid definition line
    - find_missing_definitions: referenced-but-undefined ids, numerically sorted
    - check: the three steps composed

Only the reference syntax is recognised. Headings, code fences and other
markdown constructs are not interpreted, so markers inside code blocks count.

Usage:
    from refcheck.validators.references import check

    missing = check("See [^1] and [^2].\\n[^1]: First note.")
    # [MissingDefinition(ref_id='2', lines=[1])]
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set, Tuple


# Receives advisory messages (e.g. the CLI's --verbose output)
DiagnosticSink = Callable[[str], None]

# [^N] anywhere in a line
REFERENCE_PATTERN = re.compile(r"\[\^([0-9]+)\]")

# [^N]: body -- anchored at line start, whitespace and body on the same line
DEFINITION_PATTERN = re.compile(
    r"^\[\^([0-9]+)\]:[^\S\r\n]+[^\r\n]+\r?$",
    re.MULTILINE,
)


@dataclass
class MissingDefinition:
    """A referenced id that has no definition line in the document."""

    ref_id: str
    lines: List[int] = field(default_factory=list)

    @property
    def marker(self) -> str:
        """The marker as written in the document."""
        return f"[^{self.ref_id}]"

    def describe_lines(self) -> str:
        """Return 'line N' for a single occurrence, 'lines N, M' otherwise."""
        if len(self.lines) == 1:
            return f"line {self.lines[0]}"
        return "lines " + ", ".join(str(n) for n in self.lines)


def _numeric_key(ref_id: str) -> Tuple[int, str]:
    """Order digit strings by integer value without converting them."""
    digits = ref_id.lstrip("0")
    return (len(digits), digits)


def _emit(diagnostics: Optional[DiagnosticSink], message: str) -> None:
    if diagnostics is not None:
        diagnostics(message)


def extract_references(
    content: str, diagnostics: Optional[DiagnosticSink] = None
) -> Dict[str, List[int]]:
    """
    Collect every reference marker with the lines it appears on.

    The text is split on ``\\n`` and scanned line by line. Each match appends
    its 1-based line number to the id's list, so an id used twice on one line
    is recorded twice. Definition lines also contain a marker and are counted
    like any other occurrence.

    Args:
        content: Full document text
        diagnostics: Optional sink for a summary of the ids found

    Returns:
        Mapping of id -> line numbers in document order
    """
    references: Dict[str, List[int]] = {}

    for line_num, line in enumerate(content.split("\n"), start=1):
        for match in REFERENCE_PATTERN.finditer(line):
            references.setdefault(match.group(1), []).append(line_num)

    _emit(diagnostics, f"ref: {', '.join(references)}")
    return references


def extract_definitions(
    content: str, diagnostics: Optional[DiagnosticSink] = None
) -> Set[str]:
    """
    Collect the ids that have a definition line.

    A definition must start the line, be followed by a colon, at least one
    whitespace character and a non-empty body. ``[^1]:`` on its own does not
    define ``1``.

    Args:
        content: Full document text
        diagnostics: Optional sink for a summary of the ids defined

    Returns:
        Set of defined ids
    """
    definitions: Set[str] = set()
    seen: List[str] = []

    for match in DEFINITION_PATTERN.finditer(content):
        ref_id = match.group(1)
        if ref_id not in definitions:
            definitions.add(ref_id)
            seen.append(ref_id)

    _emit(diagnostics, f"def: {', '.join(seen)}")
    return definitions


def find_missing_definitions(
    references: Dict[str, List[int]],
    definitions: Set[str],
    diagnostics: Optional[DiagnosticSink] = None,
) -> List[MissingDefinition]:
    """
    Compare references against definitions.

    Membership is decided by id equality only. The result is sorted by the
    numeric value of each id; the ids themselves are returned untouched, so
    ``"01"`` stays ``"01"``.

    Args:
        references: Output of extract_references
        definitions: Output of extract_definitions
        diagnostics: Optional sink, called only when something is missing

    Returns:
        Missing definitions, ascending by numeric id
    """
    missing = [
        MissingDefinition(ref_id=ref_id, lines=list(lines))
        for ref_id, lines in references.items()
        if ref_id not in definitions
    ]
    missing.sort(key=lambda entry: _numeric_key(entry.ref_id))

    if missing:
        _emit(diagnostics, f"missing: {', '.join(m.ref_id for m in missing)}")

    return missing


def check(
    content: str, diagnostics: Optional[DiagnosticSink] = None
) -> List[MissingDefinition]:
    """Return the references in ``content`` that lack a definition."""
    references = extract_references(content, diagnostics)
    definitions = extract_definitions(content, diagnostics)
    return find_missing_definitions(references, definitions, diagnostics)


def format_missing_definition(entry: MissingDefinition) -> str:
    """Render an entry as e.g. '[^2] on line 4' or '[^2] on lines 4, 9'."""
    return f"{entry.marker} on {entry.describe_lines()}"
