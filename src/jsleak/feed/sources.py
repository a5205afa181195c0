"""Content feed: scan units and asynchronous content sources.

The scanner never reads files or captures itself. Everything it scans comes
through a ``ContentSource``: something with a ``source_id`` and an awaitable
``fetch()`` returning the resource text.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence

import structlog

DEFAULT_EXTENSIONS = (".js",)
_SCRIPT_MIME_MARKERS = ("javascript", "ecmascript")

logger = structlog.get_logger(__name__)


class FeedError(Exception):
    """Raised when a source cannot supply its content."""


class ContentSource(Protocol):
    source_id: str

    async def fetch(self) -> str: ...


@dataclass(frozen=True)
class ScanUnit:
    """One text resource with its identifier (URL or path)."""

    content: str
    source_id: str

    async def fetch(self) -> str:
        return self.content


@dataclass(frozen=True)
class FileSource:
    """A local file, read off the event loop."""

    path: Path
    max_bytes: Optional[int] = None

    @property
    def source_id(self) -> str:
        return str(self.path)

    def read(self) -> str:
        try:
            size = self.path.stat().st_size
            if self.max_bytes is not None and size > self.max_bytes:
                raise FeedError(f"{self.path}: {size} bytes exceeds limit of {self.max_bytes}")
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise FeedError(f"{self.path}: {exc.strerror or exc}") from exc

    async def fetch(self) -> str:
        return await asyncio.to_thread(self.read)


@dataclass(frozen=True)
class HarEntrySource:
    """One response body from a browser HAR capture."""

    url: str
    mime_type: str
    text: Optional[str]
    encoding: Optional[str] = None

    @property
    def source_id(self) -> str:
        return self.url

    @classmethod
    def from_entry(cls, entry: Dict[str, Any]) -> "HarEntrySource":
        """Build a source from one ``log.entries`` item. Raises FeedError if malformed."""
        request = entry.get("request") or {}
        response = entry.get("response") or {}
        if not isinstance(request, dict) or not isinstance(response, dict):
            raise FeedError("HAR entry has a malformed request or response")
        content = response.get("content") or {}
        if not isinstance(content, dict):
            raise FeedError(f"{request.get('url', '')}: malformed response content")
        text = content.get("text")
        if text is not None and not isinstance(text, str):
            raise FeedError(f"{request.get('url', '')}: response text is not a string")
        return cls(
            url=str(request.get("url", "")),
            mime_type=str(content.get("mimeType", "")),
            text=text,
            encoding=content.get("encoding"),
        )

    async def fetch(self) -> str:
        if self.text is None:
            raise FeedError(f"{self.url}: response body not captured")
        if self.encoding == "base64":
            try:
                return base64.b64decode(self.text).decode("utf-8", errors="replace")
            except (binascii.Error, ValueError) as exc:
                raise FeedError(f"{self.url}: invalid base64 body") from exc
        return self.text


def is_script_resource(
    url: str,
    mime_type: str = "",
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> bool:
    """True for resources served or named as JavaScript."""
    path = url.lower().split("?", 1)[0].split("#", 1)[0]
    if any(path.endswith(ext.lower()) for ext in extensions):
        return True
    mime = mime_type.lower()
    return any(marker in mime for marker in _SCRIPT_MIME_MARKERS)


def collect_sources(
    paths: Iterable[Path],
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    max_file_size_kb: Optional[int] = None,
) -> List[FileSource]:
    """Expand files and directories into script file sources, sorted per directory."""
    max_bytes = max_file_size_kb * 1024 if max_file_size_kb is not None else None
    sources: List[FileSource] = []
    seen: set[Path] = set()
    for path in paths:
        if path.is_dir():
            candidates = sorted(p for p in path.rglob("*") if p.is_file())
            candidates = [p for p in candidates if is_script_resource(p.name, "", extensions)]
        else:
            # Explicit files are scanned regardless of extension
            candidates = [path]
        for p in candidates:
            if p in seen:
                continue
            seen.add(p)
            sources.append(FileSource(p, max_bytes=max_bytes))
    return sources


def load_har(
    path: Path,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> List[HarEntrySource]:
    """Read a HAR capture and keep its script responses."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise FeedError(f"Failed to read HAR file {path}: {exc}") from exc

    log = data.get("log") if isinstance(data, dict) else None
    entries = log.get("entries") if isinstance(log, dict) else None
    if not isinstance(entries, list):
        raise FeedError(f"{path}: not a HAR capture (missing log.entries)")

    sources: List[HarEntrySource] = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning("har_entry_skipped", har=str(path), entry=position, error="not an object")
            continue
        try:
            source = HarEntrySource.from_entry(entry)
        except FeedError as exc:
            logger.warning("har_entry_skipped", har=str(path), entry=position, error=str(exc))
            continue
        if is_script_resource(source.url, source.mime_type, extensions):
            sources.append(source)
    return sources
