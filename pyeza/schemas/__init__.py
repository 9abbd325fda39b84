from pyeza.schemas.pagination import (
    PaginationMode,
    PaginationRequest,
    PaginationDisplay,
    PageButton,
    NumberedPageButton,
    EllipsisPageButton,
)
from pyeza.schemas.table import (
    TableColumn,
    ColumnGroup,
    SelectOption,
    ChipData,
    TableCell,
    TableAction,
    TableRow,
    TableRowGroup,
    TableEmptyState,
    TableLabels,
    PrimaryAction,
    ImportAction,
    BulkAction,
    BulkActionsConfig,
    TableConfig,
)
from pyeza.schemas.sidebar import SidebarApp, SidebarItem, SidebarSection, SidebarConfig
from pyeza.schemas.page import PageData, new_page_data

__all__ = [
    "PaginationMode",
    "PaginationRequest",
    "PaginationDisplay",
    "PageButton",
    "NumberedPageButton",
    "EllipsisPageButton",
    "TableColumn",
    "ColumnGroup",
    "SelectOption",
    "ChipData",
    "TableCell",
    "TableAction",
    "TableRow",
    "TableRowGroup",
    "TableEmptyState",
    "TableLabels",
    "PrimaryAction",
    "ImportAction",
    "BulkAction",
    "BulkActionsConfig",
    "TableConfig",
    "SidebarApp",
    "SidebarItem",
    "SidebarSection",
    "SidebarConfig",
    "PageData",
    "new_page_data",
]
