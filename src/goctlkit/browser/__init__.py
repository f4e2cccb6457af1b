"""Browser launcher exports."""

from goctlkit.browser.launcher import Browser, create_browser, resolve_launcher

__all__ = ["Browser", "create_browser", "resolve_launcher"]
