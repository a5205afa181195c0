"""Content feed: scan units, file and HAR sources."""

from jsleak.feed.sources import (
    ContentSource,
    FeedError,
    FileSource,
    HarEntrySource,
    ScanUnit,
    collect_sources,
    is_script_resource,
    load_har,
)

__all__ = [
    "ContentSource",
    "FeedError",
    "FileSource",
    "HarEntrySource",
    "ScanUnit",
    "collect_sources",
    "is_script_resource",
    "load_har",
]
