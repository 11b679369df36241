#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and run statistics for refcheck.

Functions:
    setup_logger: Initialize a RefcheckLogger for CLI operations

Classes:
    OperationStats: Base class for run statistics
    CheckStats: Statistics for reference checking runs

Usage:
    from refcheck.core.cli import setup_logger, CheckStats

    logger = setup_logger(log_dir, "refcheck")
    stats = CheckStats()
    stats.files_processed += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from refcheck.core.logging_manager import RefcheckLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> RefcheckLogger:
    """
    Setup logging for CLI operations.

    Log files are written to ``<log_dir>/operations``.

    Args:
        log_dir: Base log directory (from --log-dir or REFCHECK_LOG_DIR)
        component_name: Component identifier, used as the log file name

    Returns:
        Configured RefcheckLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return RefcheckLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds since start_time (cached after the first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class CheckStats(OperationStats):
    """
    Statistics for a reference checking run.

    Attributes:
        files_failed: Documents with at least one missing definition
        missing_definitions: Missing ids reported across all documents
    """
    files_failed: int = 0
    missing_definitions: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.files_failed < 0:
            raise ValueError(f"files_failed must be non-negative, got {self.files_failed}")
        if self.missing_definitions < 0:
            raise ValueError(
                f"missing_definitions must be non-negative, got {self.missing_definitions}"
            )

    @property
    def files_passed(self) -> int:
        return self.files_processed - self.files_failed

    def summary(self) -> str:
        """Get formatted summary with reference metrics."""
        return (
            f"{self.files_processed} files checked, "
            f"{self.files_failed} failed, "
            f"{self.missing_definitions} missing definitions, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "files_passed": self.files_passed,
            "files_failed": self.files_failed,
            "missing_definitions": self.missing_definitions,
        })
        return d
