"""
Chip Cell Service

Builds "chips" table cells: a few visible labels, a "+N more" overflow
count, and a tooltip listing every label.
"""

from typing import List, Mapping, Optional

import structlog

from pyeza.core.config import get_settings
from pyeza.schemas.table import ChipData, TableCell

logger = structlog.get_logger()


def build_chip_cell_from_labels(labels: List[str], max_visible: Optional[int] = None) -> TableCell:
    """
    Create a chips cell from label strings.

    Args:
        labels: Chip labels in display order
        max_visible: Chips shown before the rest collapse into the overflow
            count (defaults to the configured chip_max_visible)

    Returns:
        TableCell of type "chips"
    """
    if not labels:
        return TableCell(type="chips")

    if max_visible is None:
        max_visible = get_settings().chip_max_visible
    max_visible = max(max_visible, 0)

    visible = labels[:max_visible]
    return TableCell(
        type="chips",
        chips=[ChipData(label=label) for label in visible],
        chip_overflow=len(labels) - len(visible),
        chip_tooltip=", ".join(labels),
    )


def build_chip_cell(
    comma_separated_ids: str,
    name_map: Mapping[int, str],
    max_visible: Optional[int] = None,
) -> TableCell:
    """
    Create a chips cell from comma-separated ids resolved through name_map.

    Handles both "1,2,3" and "1, 2, 3". Blank entries, non-integer ids and
    ids missing from name_map are skipped.
    """
    if not comma_separated_ids:
        return TableCell(type="chips")

    names = []
    for raw_id in comma_separated_ids.split(","):
        raw_id = raw_id.strip()
        if not raw_id:
            continue
        try:
            chip_id = int(raw_id)
        except ValueError:
            logger.debug("chips.invalid_id", raw_id=raw_id)
            continue
        if chip_id in name_map:
            names.append(name_map[chip_id])

    return build_chip_cell_from_labels(names, max_visible)
