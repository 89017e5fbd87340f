"""Minimal formatted output using ``@`` as the placeholder."""

from __future__ import annotations

import sys


def itoa(value: float) -> str:
    """Render the integer part of ``value`` in decimal."""
    return str(int(value))


def ftoa(value: float, decimal_places: int = 4) -> str:
    """Render ``value`` with a fixed number of decimal places.

    The integer part is truncated toward zero; a zero fractional part is
    printed one digit short, so ``1.0`` renders as ``1.000``.
    """
    integer = int(value)
    fraction = abs(value - integer)
    text = itoa(integer)
    if decimal_places <= 0:
        return text
    scaled = fraction * 10**decimal_places
    threshold = 10**decimal_places / 10
    zeros = 0
    while scaled < threshold and decimal_places > 0:
        zeros += 1
        threshold /= 10
        decimal_places -= 1
    digits = itoa(scaled) if scaled > 0 else ""
    tail = "0" * zeros + digits
    if not digits:
        tail = tail[:-1]
    return f"{text}.{tail}"


def _render(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return ftoa(value)
    if isinstance(value, int):
        return itoa(value)
    raise TypeError(f"cannot format value of type {type(value).__name__}")


def format_template(fmt: str, *args: object) -> str:
    """Replace each ``@`` in ``fmt`` with the next argument.

    While arguments remain, ``@@`` yields a literal ``@`` and the character
    after it is copied unexamined. Once arguments run out, the rest of the
    template is copied verbatim; extra arguments are ignored.
    """
    out: list[str] = []
    pending = list(args)
    pos = 0
    while pending:
        if pos >= len(fmt):
            return "".join(out)
        char = fmt[pos]
        if char == "@":
            if fmt[pos + 1 : pos + 2] == "@":
                out.append("@")
                pos += 2
                if pos < len(fmt):
                    out.append(fmt[pos])
                pos += 1
                continue
            out.append(_render(pending.pop(0)))
        else:
            out.append(char)
        pos += 1
    out.append(fmt[pos:])
    return "".join(out)


def tprintf(fmt: str, *args: object) -> int:
    """Write the formatted template to standard output.

    Returns the number of characters written.
    """
    text = format_template(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)