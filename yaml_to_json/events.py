"""
Event source: a cursor over the structural events PyYAML produces.
"""

import yaml

from .errors import GrammarError, SourceError, format_expected

STREAM_START   = "STREAM_START"
STREAM_END     = "STREAM_END"
DOCUMENT_START = "DOCUMENT_START"
DOCUMENT_END   = "DOCUMENT_END"
SCALAR         = "SCALAR"
SEQUENCE_START = "SEQUENCE_START"
SEQUENCE_END   = "SEQUENCE_END"
MAPPING_START  = "MAPPING_START"
MAPPING_END    = "MAPPING_END"
ALIAS          = "ALIAS"

# Not a PyYAML event: the iterator ran out before the grammar was satisfied
END_OF_EVENTS  = "END_OF_EVENTS"

EVENT_NAMES = {
    yaml.StreamStartEvent:   STREAM_START,
    yaml.StreamEndEvent:     STREAM_END,
    yaml.DocumentStartEvent: DOCUMENT_START,
    yaml.DocumentEndEvent:   DOCUMENT_END,
    yaml.ScalarEvent:        SCALAR,
    yaml.SequenceStartEvent: SEQUENCE_START,
    yaml.SequenceEndEvent:   SEQUENCE_END,
    yaml.MappingStartEvent:  MAPPING_START,
    yaml.MappingEndEvent:    MAPPING_END,
    yaml.AliasEvent:         ALIAS,
}


def event_name(event) -> str:
    return EVENT_NAMES.get(type(event), type(event).__name__)


class EventCursor:
    """
    Holds the current event and pulls the next one on demand.

    Failures of the underlying producer surface as SourceError; running out
    of events before the grammar is satisfied is a GrammarError.
    """

    def __init__(self, events) -> None:
        self._events = iter(events)
        self._current = None

    @classmethod
    def from_yaml(cls, stream):
        """Cursor over the events of a YAML string or stream."""
        return cls(yaml.parse(stream, Loader=yaml.SafeLoader))

    @property
    def current(self):
        return self._current

    @property
    def current_name(self) -> str:
        return event_name(self._current)

    @property
    def mark(self):
        return getattr(self._current, "start_mark", None)

    def advance(self, expected=()):
        try:
            self._current = next(self._events)
        except StopIteration:
            self._current = None
            msg = f"Event error: unexpected end of event stream. Expected {format_expected(expected)}."
            raise GrammarError(END_OF_EVENTS, expected, msg=msg) from None
        except (yaml.YAMLError, MemoryError) as e:
            raise SourceError(e) from e
        return self._current
