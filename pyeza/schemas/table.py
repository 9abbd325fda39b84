"""Table view models rendered by the data table component."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from pyeza.schemas.pagination import PaginationDisplay

CellType = Literal["text", "badge", "name", "link", "chips", "html", "author", "input", "select"]


class TableColumn(BaseModel):
    key: str
    label: str = ""
    sortable: bool = False
    width: str = ""  # e.g. "200px", "20%"
    min_width: str = ""
    align: str = ""  # "left" (default), "center", "right"
    v_align: str = ""  # "top" (default), "middle", "bottom"


class ColumnGroup(BaseModel):
    """A shared parent header spanning several columns."""
    label: str
    columns: List[TableColumn] = Field(default_factory=list)


class SelectOption(BaseModel):
    value: str
    label: str = ""
    selected: bool = False


class ChipData(BaseModel):
    label: str


class TableCell(BaseModel):
    type: CellType = "text"
    value: str = ""
    variant: str = ""  # badge variant, e.g. "success", "error", "warning"
    badge_type: str = "status"
    alert: bool = False
    href: str = ""
    html: str = ""

    # Copied from the column by apply_column_styles
    align: str = ""
    v_align: str = ""
    width: str = ""
    min_width: str = ""

    # "chips" cells
    chips: List[ChipData] = Field(default_factory=list)
    chip_overflow: int = 0
    chip_tooltip: str = ""

    # "input" cells
    input_name: str = ""
    input_prefix: str = ""
    input_suffix: str = ""
    input_type: str = "text"

    # "select" cells
    select_name: str = ""
    options: List[SelectOption] = Field(default_factory=list)


class TableAction(BaseModel):
    type: Literal["view", "edit", "clone", "delete", "download"]
    label: str = ""
    action: str = ""
    href: str = ""
    url: str = ""
    drawer_title: str = ""
    item_name: str = ""
    confirm_title: str = ""
    confirm_message: str = ""
    disabled: bool = False
    disabled_tooltip: str = ""


class TableRow(BaseModel):
    id: str
    href: str = ""
    data_attrs: Dict[str, str] = Field(default_factory=dict)
    cells: List[TableCell] = Field(default_factory=list)
    actions: List[TableAction] = Field(default_factory=list)
    show_checkbox: bool = False
    v_align: str = ""


class TableRowGroup(BaseModel):
    """Rows under a collapsible group header."""
    id: str
    title: str
    subtitle: str = ""
    collapsed: bool = False
    rows: List[TableRow] = Field(default_factory=list)
    data_attrs: Dict[str, str] = Field(default_factory=dict)


class TableEmptyState(BaseModel):
    icon: str = ""
    title: str = ""
    message: str = ""


class TableLabels(BaseModel):
    search: str = "Search"
    search_placeholder: str = "Search..."
    filters: str = "Filters"
    sort: str = "Sort"
    columns: str = "Columns"
    export: str = "Export"
    filter_conditions: str = "Filter conditions"
    clear_all: str = "Clear all"
    add_condition: str = "Add condition"
    clear: str = "Clear"
    apply_filters: str = "Apply filters"
    density_default: str = "Default"
    density_comfortable: str = "Comfortable"
    density_compact: str = "Compact"
    show: str = "Show"
    entries: str = "entries"
    showing: str = "Showing"
    to: str = "to"
    of: str = "of"
    entries_label: str = "entries"
    select_all: str = "Select all"
    actions: str = "Actions"
    prev: str = "Prev"
    next: str = "Next"


class PrimaryAction(BaseModel):
    label: str
    href: str = ""
    icon: str = ""
    action_url: str = ""


class ImportAction(BaseModel):
    label: str
    icon: str = ""
    href: str = ""
    action_url: str = ""


class BulkAction(BaseModel):
    key: str
    label: str
    icon: str = ""
    variant: Literal["default", "danger", "primary", "warning"] = "default"
    endpoint: str = ""
    confirm_title: str = ""
    confirm_message: str = ""  # may contain a {{count}} placeholder
    extra_params_json: str = ""
    # Data attribute that must be "true" on every selected row
    requires_data_attr: str = ""


class BulkActionsConfig(BaseModel):
    enabled: bool = False
    actions: List[BulkAction] = Field(default_factory=list)
    select_all_label: str = ""
    selected_label: str = ""  # e.g. "{count} selected"
    cancel_label: str = ""


class TableConfig(BaseModel):
    """
    Everything the table component needs to render.

    Use ``rows`` for a flat table or ``groups`` for grouped rows, and
    ``columns`` or ``column_groups`` for single or two-level headers.
    ``server_pagination`` switches the table to server-side search, sort,
    filter and paging; None keeps it client-side.
    """

    id: str
    title: str = ""
    card_class: str = ""
    refresh_url: str = ""
    columns: List[TableColumn] = Field(default_factory=list)
    column_groups: List[ColumnGroup] = Field(default_factory=list)
    rows: List[TableRow] = Field(default_factory=list)
    groups: List[TableRowGroup] = Field(default_factory=list)
    minimal: bool = False
    show_checkbox: bool = False
    show_search: bool = False
    show_filters: bool = False
    show_sort: bool = False
    show_columns: bool = False
    show_export: bool = False
    show_density: bool = False
    show_entries: bool = False
    show_actions: bool = False
    default_sort_column: str = ""
    default_sort_direction: Literal["asc", "desc"] = "asc"
    labels: TableLabels = Field(default_factory=TableLabels)
    empty_state: TableEmptyState = Field(default_factory=TableEmptyState)
    import_action: Optional[ImportAction] = None
    primary_action: Optional[PrimaryAction] = None
    bulk_actions: Optional[BulkActionsConfig] = None
    fixed_layout: bool = False
    server_pagination: Optional[PaginationDisplay] = None
