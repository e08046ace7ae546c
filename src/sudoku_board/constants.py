"""
Board constants and display utilities.
"""

from typing import Optional, Sequence


# ============================================================================
# Cell markers
# ============================================================================

EMPTY = -1  # unassigned cell value
FORCED = -1  # single-candidate marker given to committed cells

DEFAULT_SIDE = 9
DEFAULT_BOX_WIDTH = 3
DEFAULT_BOX_HEIGHT = 3


# ============================================================================
# Selection classes (relative to a selected cell)
# ============================================================================

SELECTION_UNRELATED = -1
SELECTION_SAME_VALUE = 0
SELECTION_SAME_LINE = 1


# ============================================================================
# Display Utility
# ============================================================================


def format_grid(
    values: Sequence[int],
    side: int,
    box_width: int,
    box_height: int,
    mask: Optional[Sequence[bool]] = None,
) -> str:
    """
    Format a row-major board for display.

    Args:
        values: side*side cell values (0-based symbols, EMPTY for none).
        side: Board side length.
        box_width: Box width, a '|' is drawn between boxes.
        box_height: Box height, a dashed line is drawn between box bands.
        mask: Optional filled mask; cells with a False entry show as '.'.

    Returns:
        Formatted multi-line string, symbols shown 1-based.
    """
    width = len(str(side))
    lines = []
    for y in range(side):
        parts = []
        for x in range(side):
            i = x + y * side
            hidden = values[i] == EMPTY or (mask is not None and not mask[i])
            parts.append(".".rjust(width) if hidden else str(values[i] + 1).rjust(width))
            if (x + 1) % box_width == 0 and x + 1 < side:
                parts.append("|")
        row_str = " ".join(parts)
        lines.append(row_str)
        if (y + 1) % box_height == 0 and y + 1 < side:
            lines.append("-" * len(row_str))
    return "\n".join(lines)
