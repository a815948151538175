"""Trash Cleaner — strip unwanted records from a bangs array literal."""

from .cleaner import Cleaner, CleanerConfig, process_content, remove_blank_lines
from .classifier import DEFAULT_FORBIDDEN_PATTERNS, is_standalone_match, should_remove_item
from .config import ConfigError, build_config, load_config, load_from_yaml
from .patterns import scan_records
from .types import Classification, ProcessResult, Record, RemovedItem

__all__ = [
    "Cleaner", "CleanerConfig",
    "process_content", "remove_blank_lines",
    "should_remove_item", "is_standalone_match", "DEFAULT_FORBIDDEN_PATTERNS",
    "scan_records",
    "build_config", "load_config", "load_from_yaml", "ConfigError",
    "Classification", "ProcessResult", "Record", "RemovedItem",
]
__version__ = "0.1.0"
