from typing import List

from pydantic import BaseModel, Field


class SidebarApp(BaseModel):
    """An entry in the app switcher dropdown."""
    key: str
    label: str
    icon: str = ""  # template name, e.g. "icon-users"
    url: str = ""


class SidebarItem(BaseModel):
    key: str
    label: str
    icon: str = ""
    href: str = ""
    tooltip: str = ""
    children: List["SidebarItem"] = Field(default_factory=list)


class SidebarSection(BaseModel):
    title: str = ""  # empty renders no section title
    items: List[SidebarItem] = Field(default_factory=list)


class SidebarConfig(BaseModel):
    logo_text: str = ""
    logo_url: str = ""
    apps: List[SidebarApp] = Field(default_factory=list)
    active_app: str = ""
    sections: List[SidebarSection] = Field(default_factory=list)
    active_nav: str = ""
    active_sub_nav: str = ""
