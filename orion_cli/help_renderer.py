"""Column-aligned help listing for command tables."""

import sys
from typing import List, Optional, Sequence, TextIO

from .descriptor import CommandDescriptor

INDENT = 4


def _label(descriptor: CommandDescriptor) -> str:
    return f"{descriptor.name} {descriptor.param_hint or ''}"


def compute_column_width(descriptors: Sequence[CommandDescriptor], minimum_width: int = 0) -> int:
    """
    Compute the width of the label column.

    Args:
        descriptors: Command table
        minimum_width: Width returned when no label is longer

    Returns:
        Length of the longest label among commands with help text
    """
    width = minimum_width

    for descriptor in descriptors:
        if descriptor.help_text is None:
            continue

        width = max(width, len(_label(descriptor)))

    return width


def format_help(descriptors: Sequence[CommandDescriptor], width: int) -> List[str]:
    """
    Lay out the help listing.

    Args:
        descriptors: Command table
        width: Label column width

    Returns:
        Output lines without line terminators
    """
    lines = []
    continuation = " " * (width + INDENT + 1)

    for descriptor in descriptors:
        if descriptor.help_text is None:
            continue

        first, *rest = descriptor.help_text.split("\n")

        lines.append(f"{' ' * INDENT}{_label(descriptor).ljust(width)} {first}")
        lines.extend(continuation + line for line in rest)

    return lines


def render_help(descriptors: Sequence[CommandDescriptor], width: int, stream: Optional[TextIO] = None) -> int:
    """
    Write the help listing.

    Args:
        descriptors: Command table
        width: Label column width
        stream: Output stream, stdout when omitted

    Returns:
        Status code, always 0
    """
    stream = stream or sys.stdout

    for line in format_help(descriptors, width):
        print(line, file=stream)

    return 0


def show_help(descriptors: Sequence[CommandDescriptor], minimum_width: int = 0, stream: Optional[TextIO] = None) -> int:
    """Write the help listing with the column sized to the longest label plus one."""
    return render_help(descriptors, compute_column_width(descriptors, minimum_width) + 1, stream)
