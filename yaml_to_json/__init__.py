"""
Streaming YAML to JSON translator built on the PyYAML event parser.
"""

from .errors import GrammarError, NestingError, SourceError, TranslationError, UsageError, report_source_error
from .events import EventCursor, event_name
from .translator import Translator, convert_stream, translate, yaml_to_json

__all__ = [
    "EventCursor",
    "GrammarError",
    "NestingError",
    "SourceError",
    "TranslationError",
    "Translator",
    "UsageError",
    "convert_stream",
    "event_name",
    "report_source_error",
    "translate",
    "yaml_to_json",
]
