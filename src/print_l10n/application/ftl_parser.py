import re
from typing import Dict, Iterable, List, Optional, Tuple
from ..domain.models import Element, MessageEntry, MessageTable, Reference
from ..domain.errors import DuplicateIdentifierError, FtlSyntaxError


class FtlParser:
    """
    Parses the flat `.ftl` table format into a MessageTable.

    Supported subset:
        identifier = text            message
        -identifier = text           term, only usable through `{ -identifier }`
        # / ## / ### comment         heading (standalone) or entry annotation (attached)
        indented line                continuation of the previous value
        { "literal" }                quoted text, used for literal braces
    """

    _ENTRY_RE = re.compile(r"^(-?[a-zA-Z][a-zA-Z0-9_-]*)[ \t]*=[ \t]*(.*)$")
    _COMMENT_RE = re.compile(r"^(#{1,3})(?: (.*))?$")
    _IDENTIFIER_RE = re.compile(r"^-?[a-zA-Z][a-zA-Z0-9_-]*$")

    @classmethod
    def parse(cls, source: str, locale: str, resource: str = "<string>") -> MessageTable:
        return cls.parse_resources([(resource, source)], locale)

    @classmethod
    def parse_resources(cls, resources: Iterable[Tuple[str, str]], locale: str) -> MessageTable:
        """
        Parse several (resource name, source) pairs into one table.
        An identifier may only be defined once across all of them.
        """
        entries: Dict[str, MessageEntry] = {}
        for resource, source in resources:
            for line_number, entry in cls._parse_entries(source, resource):
                if entry.identifier in entries:
                    raise DuplicateIdentifierError(entry.identifier, resource, line_number)
                entries[entry.identifier] = entry
        return MessageTable(locale, entries)

    @classmethod
    def _parse_entries(cls, source: str, resource: str) -> List[Tuple[int, MessageEntry]]:
        parsed: List[Tuple[int, MessageEntry]] = []
        group: Optional[str] = None
        pending_comment: List[str] = []

        # (line_number, raw line, identifier, value lines, attached comment)
        current: Optional[Tuple[int, str, str, List[str], Optional[str]]] = None

        def finish() -> None:
            line_number, raw, identifier, value_lines, comment = current
            value = "\n".join(v for v in value_lines if v)
            if not value:
                raise FtlSyntaxError(f"Expected a value for '{identifier}'", resource, line_number, raw)
            elements = cls._parse_pattern(value, resource, line_number, raw)
            # `{ "" }` alone is still an empty value
            if all(isinstance(e, str) and not e for e in elements):
                raise FtlSyntaxError(f"Expected a value for '{identifier}'", resource, line_number, raw)
            parsed.append((line_number, MessageEntry(identifier, elements, comment, group)))

        for line_number, raw in enumerate(source.splitlines(), start=1):
            line = raw.rstrip()

            if line and line[0] in " \t" and line.strip():
                if current is None:
                    raise FtlSyntaxError("Unexpected indented line", resource, line_number, raw)
                current[3].append(line.strip())
                continue

            if current is not None:
                finish()
                current = None

            if not line.strip():
                # A comment block followed by a blank line is a section heading
                if pending_comment:
                    group = "\n".join(pending_comment)
                    pending_comment = []
                continue

            comment_match = cls._COMMENT_RE.match(line)
            if comment_match:
                level, text = comment_match.groups()
                if len(level) > 1:
                    group = text or None
                    pending_comment = []
                else:
                    pending_comment.append(text or "")
                continue

            entry_match = cls._ENTRY_RE.match(line)
            if entry_match is None:
                raise FtlSyntaxError("Expected 'identifier = value' or a comment", resource, line_number, raw)

            identifier, value = entry_match.groups()
            comment = "\n".join(pending_comment) if pending_comment else None
            pending_comment = []
            current = (line_number, raw, identifier, [value.strip()], comment)

        if current is not None:
            finish()

        return parsed

    @classmethod
    def _parse_pattern(cls, text: str, resource: str, line_number: int, raw: str) -> Tuple[Element, ...]:
        elements: List[Element] = []
        buffer: List[str] = []
        i = 0

        while i < len(text):
            ch = text[i]
            if ch == "{":
                placeable, i = cls._read_placeable(text, i + 1, resource, line_number, raw)
                if isinstance(placeable, Reference):
                    if buffer:
                        elements.append("".join(buffer))
                        buffer = []
                    elements.append(placeable)
                else:
                    buffer.append(placeable)
                continue
            if ch == "}":
                raise FtlSyntaxError("Unbalanced closing brace", resource, line_number, raw)
            buffer.append(ch)
            i += 1

        if buffer:
            elements.append("".join(buffer))
        return tuple(elements)

    @classmethod
    def _read_placeable(cls, text: str, start: int, resource: str, line_number: int, raw: str):
        """
        Read the inside of `{ ... }` starting right after the opening brace.
        Returns (Reference or literal text, index after the closing brace).
        """
        i = start
        while i < len(text) and text[i] in " \t\n":
            i += 1

        if i < len(text) and text[i] == '"':
            literal, i = cls._read_string_literal(text, i + 1, resource, line_number, raw)
            while i < len(text) and text[i] in " \t\n":
                i += 1
            if i >= len(text) or text[i] != "}":
                raise FtlSyntaxError("Expected '}' after string literal", resource, line_number, raw)
            return literal, i + 1

        close = text.find("}", i)
        if close == -1:
            raise FtlSyntaxError("Unterminated placeable", resource, line_number, raw)

        identifier = text[i:close].strip()
        if not cls._IDENTIFIER_RE.match(identifier):
            raise FtlSyntaxError(f"Unsupported placeable '{{{text[start:close]}}}'", resource, line_number, raw)
        return Reference(identifier), close + 1

    @staticmethod
    def _read_string_literal(text: str, start: int, resource: str, line_number: int, raw: str):
        chars: List[str] = []
        i = start
        while i < len(text):
            ch = text[i]
            if ch == '"':
                return "".join(chars), i + 1
            if ch == "\\":
                escape = text[i + 1:i + 2]
                if escape in ('"', "\\"):
                    chars.append(escape)
                    i += 2
                    continue
                if escape == "u" and re.fullmatch(r"[0-9a-fA-F]{4}", text[i + 2:i + 6]):
                    chars.append(chr(int(text[i + 2:i + 6], 16)))
                    i += 6
                    continue
                raise FtlSyntaxError(f"Unknown escape sequence '\\{escape}'", resource, line_number, raw)
            if ch == "\n":
                break
            chars.append(ch)
            i += 1
        raise FtlSyntaxError("Unterminated string literal", resource, line_number, raw)
