# _utils/__init__.py

from ._wcag_link_data import AXE_TAGS_TO_WCAG_LINK_DATA, WcagLinkData

__all__ = [
    "AXE_TAGS_TO_WCAG_LINK_DATA",
    "WcagLinkData",
]
