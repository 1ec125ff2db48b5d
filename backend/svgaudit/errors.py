"""Failure taxonomy surfaced to callers of the audit pipeline.

Every failure is raised, never returned half-filled:
- SourceUnavailable: the document bytes could not be read.
- MalformedDocument: the markup did not parse into a tree.
- ExtractionFailure: an unexpected fault while walking an already-built tree.
"""

from __future__ import annotations


class SvgAuditError(Exception):
    """Base class for all audit failures."""

    def __init__(self, message: str, source: str = "<string>") -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        return f"{self.source}: {self.args[0]}"


class SourceUnavailable(SvgAuditError):
    pass


class MalformedDocument(SvgAuditError):
    pass


class ExtractionFailure(SvgAuditError):
    pass
