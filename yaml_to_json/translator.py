"""
Streaming YAML to JSON translator.

Consumes the structural events of a YAML stream and writes JSON text as it
goes, one recursive call per sequence or mapping; no document tree is built.

    stream    := STREAM_START document* STREAM_END
    document  := DOCUMENT_START value DOCUMENT_END
    value     := SCALAR | sequence | mapping
    sequence  := SEQUENCE_START value* SEQUENCE_END
    mapping   := MAPPING_START (SCALAR value)* MAPPING_END
"""

import io

from .errors import GrammarError, NestingError
from .events import (
    ALIAS, DOCUMENT_END, DOCUMENT_START, MAPPING_END, MAPPING_START, SCALAR,
    SEQUENCE_END, SEQUENCE_START, STREAM_END, STREAM_START, EventCursor, event_name,
)
from .scalar import render_key, render_scalar

DEFAULT_MAX_DEPTH = 256
DEFAULT_DOCUMENT_END = "\n"

EXPECTED_IN_STREAM   = (DOCUMENT_START, STREAM_END)
EXPECTED_IN_DOCUMENT = (SEQUENCE_START, MAPPING_START)
EXPECTED_IN_SEQUENCE = (MAPPING_START, SEQUENCE_START, SCALAR, SEQUENCE_END)
EXPECTED_KEY         = (SCALAR, MAPPING_END)
EXPECTED_VALUE       = (MAPPING_START, SEQUENCE_START, SCALAR)


class Tokens:
    def __init__(self, compact: bool = False) -> None:
        if compact:
            self.begin_array, self.end_array = "[", "]"
            self.begin_object, self.end_object = "{", "}"
            self.value_separator, self.name_separator = ",", ":"
        else:
            self.begin_array, self.end_array = "[ ", " ]"
            self.begin_object, self.end_object = "{ ", " }"
            self.value_separator, self.name_separator = ", ", ": "


class Translator:
    """
    Translates the events of a cursor into JSON text written to out
    """

    def __init__(self, cursor: EventCursor, out, escape: bool = True, ensure_ascii: bool = True,
                 compact: bool = False, allow_empty: bool = True,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 document_end: str = DEFAULT_DOCUMENT_END) -> None:
        self._cursor = cursor
        self._out = out
        self._escape = escape
        self._ensure_ascii = ensure_ascii
        self._allow_empty = allow_empty
        self._max_depth = max_depth
        self._document_end = document_end
        self._tokens = Tokens(compact)
        self._depth = 0
        self._documents = 0

    @property
    def documents(self) -> int:
        return self._documents

    def _write(self, text: str):
        self._out.write(text)

    def _unexpected(self, expected):
        name = self._cursor.current_name
        return GrammarError(name, expected, self._cursor.mark, unsupported=(name == ALIAS))

    def run(self):
        self.translate_stream()

    def translate_stream(self):
        if event_name(self._cursor.advance((STREAM_START,))) != STREAM_START:
            raise self._unexpected((STREAM_START,))
        while True:
            name = event_name(self._cursor.advance(EXPECTED_IN_STREAM))
            if name == STREAM_END:
                return
            elif name == DOCUMENT_START:
                self.translate_document()
            else:
                raise self._unexpected(EXPECTED_IN_STREAM)

    def translate_document(self):
        name = event_name(self._cursor.advance(EXPECTED_IN_DOCUMENT))
        if name == SEQUENCE_START:
            self.translate_sequence()
        elif name == MAPPING_START:
            self.translate_mapping()
        else:
            raise self._unexpected(EXPECTED_IN_DOCUMENT)
        if event_name(self._cursor.advance((DOCUMENT_END,))) != DOCUMENT_END:
            raise self._unexpected((DOCUMENT_END,))
        self._write(self._document_end)
        self._documents += 1

    def _enter(self, name: str):
        if self._depth >= self._max_depth:
            raise NestingError(name, self._max_depth, self._cursor.mark)
        self._depth += 1

    def _leave(self):
        self._depth -= 1

    def translate_value(self, expected) -> None:
        """Translate the value the cursor stands on: a scalar or a container."""
        event = self._cursor.current
        name = event_name(event)
        if name == SCALAR:
            self._write(render_scalar(event.value, event.style, self._escape,
                                      self._ensure_ascii, self._allow_empty))
        elif name == SEQUENCE_START:
            self.translate_sequence()
        elif name == MAPPING_START:
            self.translate_mapping()
        else:
            raise self._unexpected(expected)

    def translate_sequence(self):
        self._enter(SEQUENCE_START)
        self._write(self._tokens.begin_array)
        element_count = 0
        while True:
            name = event_name(self._cursor.advance(EXPECTED_IN_SEQUENCE))
            if name == SEQUENCE_END:
                break
            if name not in EXPECTED_IN_SEQUENCE:
                raise self._unexpected(EXPECTED_IN_SEQUENCE)
            if element_count > 0:
                self._write(self._tokens.value_separator)
            self.translate_value(EXPECTED_IN_SEQUENCE)
            element_count += 1
        if element_count == 0:
            self._write(self._tokens.end_array.lstrip())
        else:
            self._write(self._tokens.end_array)
        self._leave()
        return element_count

    def translate_mapping(self):
        self._enter(MAPPING_START)
        self._write(self._tokens.begin_object)
        member_count = 0
        while True:
            key = self._cursor.advance(EXPECTED_KEY)
            name = event_name(key)
            if name == MAPPING_END:
                break
            if name != SCALAR:
                raise self._unexpected(EXPECTED_KEY)
            if member_count > 0:
                self._write(self._tokens.value_separator)
            self._write(render_key(key.value, self._escape, self._ensure_ascii, self._allow_empty))
            self._write(self._tokens.name_separator)
            self._cursor.advance(EXPECTED_VALUE)
            self.translate_value(EXPECTED_VALUE)
            member_count += 1
        if member_count == 0:
            self._write(self._tokens.end_object.lstrip())
        else:
            self._write(self._tokens.end_object)
        self._leave()
        return member_count


def translate(events, out, **options) -> int:
    """
    Translate an iterable of PyYAML events into JSON text written to out.
    Returns the number of documents written.
    """
    translator = Translator(EventCursor(events), out, **options)
    translator.run()
    return translator.documents


def convert_stream(instream, outstream, **options) -> int:
    """Parse YAML from instream (text, bytes or a stream) and write JSON to outstream."""
    translator = Translator(EventCursor.from_yaml(instream), outstream, **options)
    translator.run()
    return translator.documents


def yaml_to_json(source, **options) -> str:
    out = io.StringIO()
    convert_stream(source, out, **options)
    return out.getvalue()
