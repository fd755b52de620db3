"""
Resolve ``{%NAME}`` placeholders in private package download URLs.

Values come from the process environment, falling back to a local .env file.
"""
from .config import Settings, get_settings
from .env_view import EnvironmentView, mask_sensitive
from .resolver import (
    MissingVariableError,
    PlaceholderResolver,
    find_placeholders,
    has_placeholders,
    resolve_placeholders,
)
from .rewriter import UrlRewriter, select_operation_package
from .types import (
    FetchConfig,
    FileDownloadEvent,
    Package,
    PackageOperation,
    RewriteResult,
)
from .plugin import (
    Plugin,
    PRE_FILE_DOWNLOAD,
    PRE_PACKAGE_INSTALL,
    PRE_PACKAGE_UPDATE,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Resolution
    "EnvironmentView",
    "mask_sensitive",
    "MissingVariableError",
    "PlaceholderResolver",
    "find_placeholders",
    "has_placeholders",
    "resolve_placeholders",
    # Rewriting
    "UrlRewriter",
    "select_operation_package",
    # Types
    "FetchConfig",
    "FileDownloadEvent",
    "Package",
    "PackageOperation",
    "RewriteResult",
    # Host adapter
    "Plugin",
    "PRE_FILE_DOWNLOAD",
    "PRE_PACKAGE_INSTALL",
    "PRE_PACKAGE_UPDATE",
]
