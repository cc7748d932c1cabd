"""
Micro-syntax embedded in rendered markdown.

    include{{ partials/hero }}    replaced by the compiled partial
    {{ this.site.name }}          replaced by a configuration value

Any other ``{{ name }}`` is left for the page as written.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterator, NamedTuple

TEXT = "text"
INCLUDE = "include"
VARIABLE = "variable"

PREFIX = "this."

TOKEN_PATTERN = re.compile(
    r"(?P<include>include\{\{\s*(?P<path>[-@/\w.]+)\s*\}\})"
    r"|(?P<variable>\{\{\s*(?P<name>[-\w.]+)\s*\}\})"
)


class Token(NamedTuple):
    kind: str
    value: str
    raw: str


class MissingFieldError(LookupError):
    def __init__(self, path: str, key: str):
        super().__init__(f"'{path}' has no field '{key}'")
        self.path = path
        self.key = key


def tokenize(text: str) -> Iterator[Token]:
    position = 0
    for match in TOKEN_PATTERN.finditer(text):
        if match.start() > position:
            literal = text[position:match.start()]
            yield Token(TEXT, literal, literal)
        if match.group("include"):
            yield Token(INCLUDE, match.group("path"), match.group(0))
        else:
            yield Token(VARIABLE, match.group("name"), match.group(0))
        position = match.end()
    if position < len(text):
        literal = text[position:]
        yield Token(TEXT, literal, literal)


def lookup(data: Any, path: str) -> Any:
    """Walk a dotted path through nested mappings (and lists by index)"""
    value = data
    for key in path.split("."):
        if isinstance(value, Mapping) and key in value:
            value = value[key]
        elif isinstance(value, Sequence) and not isinstance(value, str) \
                and key.isdigit() and int(key) < len(value):
            value = value[int(key)]
        else:
            raise MissingFieldError(path, key)
    return value


def resolve_includes(text: str, include: Callable[[str], str]) -> str:
    """Substitute every include directive, each occurrence compiled on its own"""
    return "".join(
        include(token.value) if token.kind == INCLUDE else token.raw
        for token in tokenize(text)
    )


def resolve_variables(text: str, data: Mapping[str, Any]) -> str:
    parts = []
    for token in tokenize(text):
        if token.kind == VARIABLE and token.value.startswith(PREFIX):
            parts.append(str(lookup(data, token.value[len(PREFIX):])))
        else:
            parts.append(token.raw)
    return "".join(parts)
