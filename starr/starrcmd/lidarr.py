"""Lidarr custom script events and readers for their environment data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from starr.starrcmd.event import CmdEvent, Event
from starr.starrcmd.parser import env_field


@dataclass
class LidarrApplicationUpdate:
    """The ApplicationUpdate event."""

    previous_version: str = env_field("lidarr_update_previousversion")
    new_version: str = env_field("lidarr_update_newversion")
    message: str = env_field("lidarr_update_message")


@dataclass
class LidarrHealthIssue:
    """The HealthIssue event."""

    message: str = env_field("lidarr_health_issue_message")
    issue_type: str = env_field("lidarr_health_issue_type")
    wiki: str = env_field("lidarr_health_issue_wiki")
    level: str = env_field("lidarr_health_issue_level")


@dataclass
class LidarrGrab:
    """The Grab event."""

    download_client: str = env_field("lidarr_download_client")
    album_count: int = env_field("lidarr_release_albumcount")
    size: int = env_field("lidarr_release_size")
    release_dates: list[datetime] = env_field("lidarr_release_albumreleasedates", ",")
    artist_id: int = env_field("lidarr_artist_id")
    artist_name: str = env_field("lidarr_artist_name")
    mbid: str = env_field("lidarr_artist_mbid")
    indexer: str = env_field("lidarr_release_indexer")
    quality_version: int = env_field("lidarr_release_qualityversion")
    quality: str = env_field("lidarr_release_quality")
    release_group: str = env_field("lidarr_release_releasegroup")
    release_title: str = env_field("lidarr_release_title")
    album_mbids: list[str] = env_field("lidarr_release_albummbids", "|")
    download_id: str = env_field("lidarr_download_id")
    titles: list[str] = env_field("lidarr_release_albumtitles", "|")
    artist_type: str = env_field("lidarr_artist_type")


@dataclass
class LidarrAlbumDownload:
    """The AlbumDownload event."""

    artist_id: int = env_field("lidarr_artist_id")
    artist_name: str = env_field("lidarr_artist_name")
    path: str = env_field("lidarr_artist_path")
    artist_mbid: str = env_field("lidarr_artist_mbid")
    artist_type: str = env_field("lidarr_artist_type")
    album_id: int = env_field("lidarr_album_id")
    title: str = env_field("lidarr_album_title")
    mbid: str = env_field("lidarr_album_mbid")
    album_release_mbid: str = env_field("lidarr_albumrelease_mbid")
    release_date: datetime | None = env_field("lidarr_album_releasedate")
    download_client: str = env_field("lidarr_download_client")
    download_id: str = env_field("lidarr_download_id")
    added_track_paths: list[str] = env_field("lidarr_addedtrackpaths", "|")
    deleted_paths: list[str] = env_field("lidarr_deletedpaths", "|")


@dataclass
class LidarrRename:
    """The Rename event."""

    artist_id: int = env_field("lidarr_artist_id")
    artist_name: str = env_field("lidarr_artist_name")
    path: str = env_field("lidarr_artist_path")
    artist_mbid: str = env_field("lidarr_artist_mbid")
    artist_type: str = env_field("lidarr_artist_type")


@dataclass
class LidarrTrackRetag:
    """The TrackRetag event."""

    artist_id: int = env_field("lidarr_artist_id")
    artist_name: str = env_field("lidarr_artist_name")
    path: str = env_field("lidarr_artist_path")
    artist_mbid: str = env_field("lidarr_artist_mbid")
    artist_type: str = env_field("lidarr_artist_type")
    id: int = env_field("lidarr_album_id")
    title: str = env_field("lidarr_album_title")
    mbid: str = env_field("lidarr_album_mbid")
    album_release_mbid: str = env_field("lidarr_albumrelease_mbid")
    release_date: datetime | None = env_field("lidarr_album_releasedate")
    file_id: int = env_field("lidarr_trackfile_id")
    track_count: str = env_field("lidarr_trackfile_trackcount")
    file_path: str = env_field("lidarr_trackfile_path")
    track_numbers: list[int] = env_field("lidarr_trackfile_tracknumbers", ",")
    track_titles: list[str] = env_field("lidarr_trackfile_tracktitles", "|")
    quality: str = env_field("lidarr_trackfile_quality")
    quality_version: int = env_field("lidarr_trackfile_qualityversion")
    release_group: str = env_field("lidarr_trackfile_releasegroup")
    scene_name: str = env_field("lidarr_trackfile_scenename")
    tags_diff: str = env_field("lidarr_tags_diff")
    tags_scrubbed: bool = env_field("lidarr_tags_scrubbed")


@dataclass
class LidarrTest:
    """The Test event; it carries no data."""


def get_lidarr_application_update(
    cmd: CmdEvent, environ: Mapping[str, str] | None = None
) -> LidarrApplicationUpdate:
    """Return the ApplicationUpdate event data."""
    return cmd.get(Event.APPLICATION_UPDATE, LidarrApplicationUpdate, environ)


def get_lidarr_health_issue(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> LidarrHealthIssue:
    """Return the HealthIssue event data."""
    return cmd.get(Event.HEALTH_ISSUE, LidarrHealthIssue, environ)


def get_lidarr_grab(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> LidarrGrab:
    """Return the Grab event data."""
    return cmd.get(Event.GRAB, LidarrGrab, environ)


def get_lidarr_album_download(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> LidarrAlbumDownload:
    """Return the AlbumDownload event data."""
    return cmd.get(Event.ALBUM_DOWNLOAD, LidarrAlbumDownload, environ)


def get_lidarr_rename(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> LidarrRename:
    """Return the Rename event data."""
    return cmd.get(Event.RENAME, LidarrRename, environ)


def get_lidarr_track_retag(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> LidarrTrackRetag:
    """Return the TrackRetag event data."""
    return cmd.get(Event.TRACK_RETAG, LidarrTrackRetag, environ)


def get_lidarr_test(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> LidarrTest:
    """Return the Test event data."""
    return cmd.get(Event.TEST, LidarrTest, environ)