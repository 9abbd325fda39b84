"""Base page data passed to every page template."""

from typing import Dict

from pydantic import BaseModel, Field

from pyeza.schemas.sidebar import SidebarConfig


class PageData(BaseModel):
    cache_version: str = ""
    title: str = ""
    # Name of the content template rendered inside the app shell. Set it from
    # view code only, never from request input.
    content_template: str = ""
    current_path: str = ""
    active_nav: str = ""
    active_sub_nav: str = ""
    sidebar: SidebarConfig = Field(default_factory=SidebarConfig)
    header_icon: str = ""
    header_title: str = ""
    header_subtitle: str = ""
    search_placeholder: str = ""
    has_notifications: bool = False
    help_content: str = ""  # pre-rendered HTML
    has_help: bool = False
    messages: Dict[str, str] = Field(default_factory=dict)  # flat dot-notation keys

    def translate(self, key: str) -> str:
        """Look up a dot-notation message key, falling back to the key itself."""
        return self.messages.get(key, key)


def new_page_data(title: str, path: str, active_nav: str, cache_version: str = "") -> PageData:
    return PageData(
        cache_version=cache_version,
        title=title,
        current_path=path,
        active_nav=active_nav,
    )
