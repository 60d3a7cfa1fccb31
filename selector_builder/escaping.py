"""
Escaping for names and values that come from pages or config files.

The builder appends fragments verbatim; callers holding raw ids, class
names or attribute values pass them through here first.
"""


def css_escape(name: str) -> str:
    """
    Escape an identifier the way the browser's CSS.escape() does.

    Input: name - raw id or class name, e.g. "1abc" or "md:flex"
    Output: identifier safe to follow '#' or '.', e.g. "\\31 abc" or "md\\:flex"
    """
    escaped = []
    for index, char in enumerate(name):
        code = ord(char)
        if code == 0:
            escaped.append("�")
        elif (
            1 <= code <= 0x1f or code == 0x7f
            or (index == 0 and char.isdigit() and char.isascii())
            or (index == 1 and char.isdigit() and char.isascii() and name[0] == "-")
        ):
            escaped.append(f"\\{code:x} ")
        elif index == 0 and char == "-" and len(name) == 1:
            escaped.append("\\-")
        elif code >= 0x80 or char in "-_" or (char.isascii() and char.isalnum()):
            escaped.append(char)
        else:
            escaped.append(f"\\{char}")
    return "".join(escaped)


def quote_attribute_value(value: str, quote: str = '"') -> str:
    """Wrap value in quote, escaping backslashes, the quote and newlines"""
    body = (
        value.replace("\\", "\\\\")
        .replace(quote, f"\\{quote}")
        .replace("\n", "\\a ")
    )
    return f"{quote}{body}{quote}"


def attribute_spec(name: str, value: str, quote: str = '"') -> str:
    """Render name=value for SelectorState.attr()"""
    return f"{css_escape(name)}={quote_attribute_value(value, quote)}"
