"""Parsing, validation and target resolution."""

from .args import Capture, Diagnostic, Flag, OptionsRecord, OptionsSchema, exec_capture, parse_options, text_capture
from .target import resolve_target
from .validate import validate_new_split, validate_send_to_split

__all__ = [
    "Capture",
    "Diagnostic",
    "Flag",
    "OptionsRecord",
    "OptionsSchema",
    "exec_capture",
    "parse_options",
    "resolve_target",
    "text_capture",
    "validate_new_split",
    "validate_send_to_split",
]
