"""
Formatter for generated declaration text.

Takes loosely laid-out declaration syntax and returns it with canonical
whitespace: one statement per line, brace-depth indentation, single
blank lines between blocks.
"""

from typing import List, Tuple

QUOTES = ("'", '"', "`")


class FormatterError(Exception):
    """Raised when the text handed to the formatter is not well formed."""

    pass


def _scan(line: str, line_number: int) -> Tuple[str, int, int]:
    """
    Collapse whitespace outside string literals and count braces.

    Returns:
        Tuple of (normalized line, opening braces, closing braces)
    """
    out: List[str] = []
    opened = closed = 0
    quote = None
    escaped = False
    pending_space = False

    for char in line:
        if quote:
            out.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue

        if char.isspace():
            pending_space = True
            continue

        if pending_space and out:
            out.append(" ")
        pending_space = False

        if char in QUOTES:
            quote = char
        elif char == "{":
            opened += 1
        elif char == "}":
            closed += 1
        out.append(char)

    if quote:
        raise FormatterError(f"Unterminated string literal on line {line_number}")

    return "".join(out), opened, closed


def format_typescript(code: str, indent_size: int = 2) -> str:
    """
    Format TypeScript declaration text.

    Args:
        code: Unformatted declarations
        indent_size: Spaces per nesting level

    Returns:
        Formatted text ending with a newline, or "" for blank input

    Raises:
        FormatterError: On unbalanced braces or unterminated strings/comments
    """
    indent = " " * indent_size
    lines: List[str] = []
    depth = 0
    in_comment = False
    blank_pending = False
    previous = ""

    def emit(text: str):
        nonlocal blank_pending
        if blank_pending and lines:
            lines.append("")
        blank_pending = False
        lines.append(text)

    for line_number, raw_line in enumerate(code.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        # Block comment bodies are kept verbatim, aligned under the opener
        if in_comment:
            lines.append(f"{indent * depth} {line}")
            if "*/" in line:
                in_comment = False
                blank_pending = depth == 0
            previous = line
            continue

        if line.startswith("/*") or line.startswith("//"):
            if previous.endswith("}"):
                blank_pending = True
            emit(f"{indent * depth}{line}")
            if line.startswith("/*") and "*/" not in line:
                in_comment = True
            previous = line
            continue

        line, opened, closed = _scan(line, line_number)

        level = depth - 1 if line.startswith("}") else depth
        if level < 0:
            raise FormatterError(f"Unbalanced '}}' on line {line_number}")

        if previous.endswith("}") and not line.startswith("}"):
            blank_pending = True

        emit(f"{indent * level}{line}")

        depth += opened - closed
        if depth < 0:
            raise FormatterError(f"Unbalanced '}}' on line {line_number}")
        previous = line

    if in_comment:
        raise FormatterError("Unterminated block comment")
    if depth != 0:
        raise FormatterError(f"Unbalanced braces: {depth} block(s) left open")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"
