"""
Table helpers applied after rows are built.

Both helpers return new models and leave their inputs untouched.
"""

from typing import List

from pyeza.schemas.table import TableColumn, TableConfig, TableRow

COLUMN_STYLE_FIELDS = ("align", "v_align", "width", "min_width")


def apply_column_styles(columns: List[TableColumn], rows: List[TableRow]) -> List[TableRow]:
    """
    Copy alignment and width settings from each column onto its cells.

    Only non-empty column values are copied. Cells past the last column
    keep their own settings.
    """
    styled_rows = []
    for row in rows:
        cells = []
        for index, cell in enumerate(row.cells):
            if index < len(columns):
                column = columns[index]
                update = {
                    field: getattr(column, field)
                    for field in COLUMN_STYLE_FIELDS
                    if getattr(column, field)
                }
                cell = cell.model_copy(update=update)
            cells.append(cell)
        styled_rows.append(row.model_copy(update={"cells": cells}))
    return styled_rows


def apply_table_settings(config: TableConfig) -> TableConfig:
    """Propagate table-level checkbox settings to every row, grouped rows included."""
    show_checkbox = config.show_checkbox
    if config.bulk_actions is not None and config.bulk_actions.enabled:
        show_checkbox = True

    rows = [row.model_copy(update={"show_checkbox": show_checkbox}) for row in config.rows]
    groups = [
        group.model_copy(
            update={"rows": [row.model_copy(update={"show_checkbox": show_checkbox}) for row in group.rows]}
        )
        for group in config.groups
    ]
    return config.model_copy(update={"show_checkbox": show_checkbox, "rows": rows, "groups": groups})
