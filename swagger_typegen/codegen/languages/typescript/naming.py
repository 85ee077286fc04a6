"""
TypeScript-specific naming utilities and sanitization.

Handles TypeScript reserved words, builtin type names, and quoting of
property keys that are not bare identifiers.
"""

from ...core.naming import NameSanitizer, is_identifier


# TypeScript reserved words (cannot name an interface)
TS_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "implements",
    "import",
    "in",
    "instanceof",
    "interface",
    "let",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "static",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "yield",
}

# Predefined type names
TS_BUILTIN_TYPES = {
    "any",
    "bigint",
    "boolean",
    "never",
    "number",
    "object",
    "string",
    "symbol",
    "undefined",
    "unknown",
}


# Characters str.splitlines() breaks on, written as escapes
_LINE_BREAK_ESCAPES = {
    ord(char): f"\\u{ord(char):04x}"
    for char in "\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"
}
_LINE_BREAK_ESCAPES.update({ord("\n"): "\\n", ord("\r"): "\\r"})


def create_typescript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for TypeScript."""
    return NameSanitizer(TS_RESERVED_WORDS, TS_BUILTIN_TYPES)


def quote_string(value: str) -> str:
    """Single-quote a string literal, keeping it on one line."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped.translate(_LINE_BREAK_ESCAPES)}'"


def render_property_key(name: str) -> str:
    """Write a property key bare when possible, quoted otherwise."""
    return name if is_identifier(name) else quote_string(name)
