"""
Value types exchanged with the host package manager.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class FetchConfig(BaseModel):
    """
    Transport options for a single download.

    The rewriter copies these forward verbatim and only ever changes
    ``private_file_url``, the request target that replaces the host's
    processed URL.
    """

    model_config = ConfigDict(frozen=True)

    options: Dict[str, Any] = Field(default_factory=dict)
    tls_disabled: bool = False
    proxy_url: Optional[str] = None
    ca_bundle: Optional[str] = None
    cert: Optional[str] = None
    private_file_url: Optional[str] = None

    def with_private_url(self, url: str) -> "FetchConfig":
        """Return a copy targeting ``url`` with every other option preserved."""
        return self.model_copy(update={"private_file_url": url}, deep=True)


@dataclass(frozen=True)
class RewriteResult:
    """
    Outcome of download-time placeholder injection.

    Attributes:
        url: The URL to fetch (the original one when unchanged)
        fetch_config: Override config to use downstream, None when unchanged
    """

    url: str
    fetch_config: Optional[FetchConfig] = None

    @property
    def rewritten(self) -> bool:
        return self.fetch_config is not None

    @property
    def unchanged(self) -> bool:
        return self.fetch_config is None


@dataclass
class Package:
    """Package metadata as handed over by the host."""

    name: str
    pretty_version: str
    dist_url: Optional[str] = None


@dataclass
class PackageOperation:
    """
    An install/update/uninstall job from the host's transaction.

    Install and uninstall jobs carry ``package``; update jobs carry
    ``initial_package`` and ``target_package``.
    """

    job_type: str
    package: Optional[Package] = None
    initial_package: Optional[Package] = None
    target_package: Optional[Package] = None


@dataclass
class FileDownloadEvent:
    """A pending file download; the handler may replace ``fetch_config``."""

    processed_url: str
    fetch_config: FetchConfig
