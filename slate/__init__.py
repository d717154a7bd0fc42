"""Toolkit-independent widget tree, dashboards, header bar, enums and colour helpers."""

__version__ = "0.1.0"

__all__ = ["dashboard", "dashboard_card", "enums", "header_bar", "utility", "widget"]