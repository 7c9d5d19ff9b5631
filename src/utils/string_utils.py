"""
String helpers for building Dart identifiers
"""

import re
from typing import List

_SEPARATOR_PATTERN = re.compile(r'[^A-Za-z0-9]+')
_WORD_PATTERN = re.compile(r'[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+')
_INVALID_IDENTIFIER_PATTERN = re.compile(r'[^A-Za-z0-9_$]')

# Reserved words that cannot be used as Dart member names
DART_RESERVED_WORDS = frozenset({
    'assert', 'break', 'case', 'catch', 'class', 'const', 'continue',
    'default', 'do', 'else', 'enum', 'extends', 'false', 'final', 'finally',
    'for', 'if', 'in', 'is', 'new', 'null', 'rethrow', 'return', 'super',
    'switch', 'this', 'throw', 'true', 'try', 'var', 'void', 'while', 'with',
})


def split_words(value: str) -> List[str]:
    """Split a raw key into words on separators and case boundaries"""
    words: List[str] = []
    for part in _SEPARATOR_PATTERN.split(value):
        words.extend(_WORD_PATTERN.findall(part))
    return words


def capitalize(value: str) -> str:
    """Uppercase the first character and keep the rest untouched"""
    return value[:1].upper() + value[1:]


def decapitalize(value: str) -> str:
    """Lowercase the first character and keep the rest untouched"""
    return value[:1].lower() + value[1:]


def _guard_identifier(value: str) -> str:
    if not value:
        return value
    if value[0].isdigit() or value in DART_RESERVED_WORDS:
        return f'${value}'
    return value


def normalize(value: str) -> str:
    """
    Minimal sanitization of a raw name into an identifier

    Characters that are not allowed in identifiers are replaced with `_`.
    The casing is left as is.
    """
    return _guard_identifier(_INVALID_IDENTIFIER_PATTERN.sub('_', value.strip()))


def to_camel_case(value: str) -> str:
    """
    Convert a raw key to lower camel case

    Examples:
        'hello_world' -> 'helloWorld'
        'Hello World' -> 'helloWorld'
        'HTTPServer'  -> 'httpServer'
    """
    words = split_words(value)
    if not words:
        return normalize(value)
    camel = words[0].lower() + ''.join(word[:1].upper() + word[1:].lower() for word in words[1:])
    return _guard_identifier(camel)


def quote(value: str) -> str:
    """Quote a single line string as a Dart literal, avoiding escapes where possible"""
    if '"' in value and "'" in value:
        return "'" + value.replace("'", "\\'") + "'"
    if "'" in value:
        return f'"{value}"'
    return f"'{value}'"
