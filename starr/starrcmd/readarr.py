"""Readarr custom script events and readers for their environment data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from starr.starrcmd.event import CmdEvent, Event
from starr.starrcmd.parser import env_field


@dataclass
class ReadarrApplicationUpdate:
    """The ApplicationUpdate event."""

    previous_version: str = env_field("readarr_update_previousversion")
    new_version: str = env_field("readarr_update_newversion")
    message: str = env_field("readarr_update_message")


@dataclass
class ReadarrHealthIssue:
    """The HealthIssue event."""

    message: str = env_field("readarr_health_issue_message")
    issue_type: str = env_field("readarr_health_issue_type")
    wiki: str = env_field("readarr_health_issue_wiki")
    level: str = env_field("readarr_health_issue_level")


@dataclass
class ReadarrGrab:
    """The Grab event."""

    author_grid: int = env_field("readarr_author_grid")
    release_group: str = env_field("readarr_release_releasegroup")
    author_name: str = env_field("readarr_author_name")
    release_title: str = env_field("readarr_release_title")
    grids: str = env_field("readarr_release_grids")
    download_client: str = env_field("readarr_download_client")
    size: int = env_field("readarr_release_size")
    quality_version: str = env_field("readarr_release_qualityversion")
    titles: list[str] = env_field("readarr_release_booktitles", "|")
    ids: list[int] = env_field("readarr_release_bookids", "|")
    release_indexer: str = env_field("readarr_release_indexer")
    download_id: str = env_field("readarr_download_id")
    book_count: int = env_field("readarr_release_bookcount")
    release_dates: list[datetime] = env_field("readarr_release_bookreleasedates", ",")
    quality: str = env_field("readarr_release_quality")
    author_id: int = env_field("readarr_author_id")


@dataclass
class ReadarrBookDelete:
    """The BookDelete event."""

    author_name: str = env_field("readarr_author_name")
    gr_id: int = env_field("readarr_book_goodreadsid")
    author_gr_id: int = env_field("readarr_author_goodreadsid")
    title: str = env_field("readarr_book_title")
    path: str = env_field("readarr_author_path")
    id: int = env_field("readarr_book_id")
    deleted_files: bool = env_field("readarr_book_deletedfiles")
    author_id: str = env_field("readarr_author_id")


@dataclass
class ReadarrBookFileDelete:
    """The BookFileDelete event."""

    reason: str = env_field("readarr_delete_reason")
    author_id: int = env_field("readarr_author_id")
    author_name: str = env_field("readarr_author_name")
    author_gr_id: int = env_field("readarr_author_goodreadsid")
    id: str = env_field("readarr_book_id")
    title: str = env_field("readarr_book_title")
    gr_id: int = env_field("readarr_book_goodreadsid")
    file_id: int = env_field("readarr_bookfile_id")
    path: str = env_field("readarr_bookfile_path")
    quality: str = env_field("readarr_bookfile_quality")
    quality_version: int = env_field("readarr_bookfile_qualityversion")
    release_group: str = env_field("readarr_bookfile_releasegroup")
    scene_name: str = env_field("readarr_bookfile_scenename")
    edition_id: int = env_field("readarr_bookfile_edition_id")
    edition_name: str = env_field("readarr_bookfile_edition_name")
    edition_gr_id: int = env_field("readarr_bookfile_edition_goodreadsid")
    edition_isbn13: str = env_field("readarr_bookfile_edition_isbn13")
    edition_asin: str = env_field("readarr_bookfile_edition_asin")


@dataclass
class ReadarrAuthorDelete:
    """The AuthorDelete event."""

    author_id: int = env_field("readarr_author_id")
    author_name: str = env_field("readarr_author_name")
    path: str = env_field("readarr_author_path")
    author_gr_id: int = env_field("readarr_author_goodreadsid")
    deleted_files: bool = env_field("readarr_author_deletedfiles")


@dataclass
class ReadarrRename:
    """The Rename event."""

    author_id: int = env_field("readarr_author_id")
    author_name: str = env_field("readarr_author_name")
    path: str = env_field("readarr_author_path")
    author_gr_id: int = env_field("readarr_author_grid")


@dataclass
class ReadarrDownload:
    """The Download event."""

    author_id: int = env_field("readarr_author_id")
    author_name: str = env_field("readarr_author_name")
    path: str = env_field("readarr_author_path")
    author_gr_id: int = env_field("readarr_author_grid")
    id: int = env_field("readarr_book_id")
    title: str = env_field("readarr_book_title")
    gr_id: int = env_field("readarr_book_grid")
    release_date: str = env_field("readarr_book_releasedate")
    download_client: str = env_field("readarr_download_client")
    download_id: str = env_field("readarr_download_id")
    added_book_paths: list[str] = env_field("readarr_addedbookpaths", "|")
    deleted_paths: list[str] = env_field("readarr_deletedpaths", "|")


@dataclass
class ReadarrTrackRetag:
    """The TrackRetag event."""

    author_id: int = env_field("readarr_author_id")
    author_name: str = env_field("readarr_author_name")
    path: str = env_field("readarr_author_path")
    author_gr_id: int = env_field("readarr_author_grid")
    id: int = env_field("readarr_book_id")
    title: str = env_field("readarr_book_title")
    gr_id: int = env_field("readarr_book_grid")
    release_date: datetime | None = env_field("readarr_book_releasedate")
    file_id: int = env_field("readarr_bookfile_id")
    file_path: str = env_field("readarr_bookfile_path")
    quality: str = env_field("readarr_bookfile_quality")
    quality_version: int = env_field("readarr_bookfile_qualityversion")
    release_group: str = env_field("readarr_bookfile_releasegroup")
    scene_name: str = env_field("readarr_bookfile_scenename")
    tags_diff: str = env_field("readarr_tags_diff")
    scrubbed: bool = env_field("readarr_tags_scrubbed")


@dataclass
class ReadarrTest:
    """The Test event; it carries no data."""


def get_readarr_application_update(
    cmd: CmdEvent, environ: Mapping[str, str] | None = None
) -> ReadarrApplicationUpdate:
    """Return the ApplicationUpdate event data."""
    return cmd.get(Event.APPLICATION_UPDATE, ReadarrApplicationUpdate, environ)


def get_readarr_health_issue(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ReadarrHealthIssue:
    """Return the HealthIssue event data."""
    return cmd.get(Event.HEALTH_ISSUE, ReadarrHealthIssue, environ)


def get_readarr_grab(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ReadarrGrab:
    """Return the Grab event data."""
    return cmd.get(Event.GRAB, ReadarrGrab, environ)


def get_readarr_book_delete(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ReadarrBookDelete:
    """Return the BookDelete event data."""
    return cmd.get(Event.BOOK_DELETE, ReadarrBookDelete, environ)


def get_readarr_author_delete(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ReadarrAuthorDelete:
    """Return the AuthorDelete event data."""
    return cmd.get(Event.AUTHOR_DELETE, ReadarrAuthorDelete, environ)


def get_readarr_book_file_delete(
    cmd: CmdEvent, environ: Mapping[str, str] | None = None
) -> ReadarrBookFileDelete:
    """Return the BookFileDelete event data."""
    return cmd.get(Event.BOOK_FILE_DELETE, ReadarrBookFileDelete, environ)


def get_readarr_download(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ReadarrDownload:
    """Return the Download event data."""
    return cmd.get(Event.DOWNLOAD, ReadarrDownload, environ)


def get_readarr_rename(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ReadarrRename:
    """Return the Rename event data."""
    return cmd.get(Event.RENAME, ReadarrRename, environ)


def get_readarr_track_retag(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ReadarrTrackRetag:
    """Return the TrackRetag event data."""
    return cmd.get(Event.TRACK_RETAG, ReadarrTrackRetag, environ)


def get_readarr_test(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ReadarrTest:
    """Return the Test event data."""
    return cmd.get(Event.TEST, ReadarrTest, environ)