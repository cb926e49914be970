"""Helpers for reading JSON files that contain comments and trailing commas."""

_WHITESPACE = " \t\r\n"


def _blank_out(text: str) -> str:
    """Replace text with spaces, keeping line breaks so error positions stay valid."""
    return "".join(char if char in "\r\n" else " " for char in text)


def _strip_comments(text: str) -> str:
    result = []
    i = 0
    length = len(text)
    in_string = False

    while i < length:
        char = text[i]

        if in_string:
            result.append(char)
            if char == "\\" and i + 1 < length:
                result.append(text[i + 1])
                i += 2
                continue
            if char == '"':
                in_string = False
            i += 1
            continue

        if char == '"':
            in_string = True
            result.append(char)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            end = length if end == -1 else end
            result.append(_blank_out(text[i:end]))
            i = end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = length if end == -1 else end + 2
            result.append(_blank_out(text[i:end]))
            i = end
        else:
            result.append(char)
            i += 1

    return "".join(result)


def _strip_trailing_commas(text: str) -> str:
    result = []
    i = 0
    length = len(text)
    in_string = False

    while i < length:
        char = text[i]

        if in_string:
            result.append(char)
            if char == "\\" and i + 1 < length:
                result.append(text[i + 1])
                i += 2
                continue
            if char == '"':
                in_string = False
            i += 1
            continue

        if char == '"':
            in_string = True
        elif char == ",":
            j = i + 1
            while j < length and text[j] in _WHITESPACE:
                j += 1
            if j < length and text[j] in "}]":
                result.append(" ")
                i += 1
                continue

        result.append(char)
        i += 1

    return "".join(result)


def strip_json_comments(text: str, trailing_commas: bool = True) -> str:
    """Remove // and /* */ comments from JSON text.

    Comments inside string literals are left untouched. Removed characters are
    replaced with spaces so line and column numbers of the remaining JSON are
    unchanged.

    Args:
        text: JSON text with comments
        trailing_commas: Also remove commas directly before `}` or `]`

    Returns:
        Text that the standard json module can parse
    """
    stripped = _strip_comments(text)
    if trailing_commas:
        stripped = _strip_trailing_commas(stripped)
    return stripped
