"""Sonarr custom script events and readers for their environment data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from starr.starrcmd.event import CmdEvent, Event
from starr.starrcmd.parser import env_field


@dataclass
class SonarrApplicationUpdate:
    """The ApplicationUpdate event."""

    previous_version: str = env_field("sonarr_update_previousversion")
    new_version: str = env_field("sonarr_update_newversion")
    message: str = env_field("sonarr_update_message")


@dataclass
class SonarrHealthIssue:
    """The HealthIssue event."""

    message: str = env_field("sonarr_health_issue_message")
    issue_type: str = env_field("sonarr_health_issue_type")
    wiki: str = env_field("sonarr_health_issue_wiki")
    level: str = env_field("sonarr_health_issue_level")


@dataclass
class SonarrGrab:
    """The Grab event."""

    quality: str = env_field("sonarr_release_quality")
    title: str = env_field("sonarr_series_title")
    quality_version: int = env_field("sonarr_release_qualityversion")
    series_id: int = env_field("sonarr_series_id")
    episode_numbers: list[int] = env_field("sonarr_release_episodenumbers", ",")
    episode_count: int = env_field("sonarr_release_episodecount")
    download_client: str = env_field("sonarr_download_client")
    episode_air_dates: list[str] = env_field("sonarr_release_episodeairdates", ",")
    episode_titles: list[str] = env_field("sonarr_release_episodetitles", "|")
    release_title: str = env_field("sonarr_release_title")
    download_id: str = env_field("sonarr_download_id")
    release_indexer: str = env_field("sonarr_release_indexer")
    series_type: str = env_field("sonarr_series_type")
    size: int = env_field("sonarr_release_size")
    tvdb_id: int = env_field("sonarr_series_tvdbid")
    tvmaze_id: int = env_field("sonarr_series_tvmazeid")
    release_group: str = env_field("sonarr_release_releasegroup")
    season_number: int = env_field("sonarr_release_seasonnumber")
    abs_episode_numbers: list[int] = env_field("sonarr_release_absoluteepisodenumbers", ",")
    imdb_id: str = env_field("sonarr_series_imdbid")
    episode_air_dates_utc: list[datetime] = env_field("sonarr_release_episodeairdatesutc", ",")


@dataclass
class SonarrDownload:
    """The Download event."""

    title: str = env_field("sonarr_series_title")
    series_id: int = env_field("sonarr_series_id")
    source_folder: str = env_field("sonarr_episodefile_sourcefolder")
    quality_version: int = env_field("sonarr_episodefile_qualityversion")
    quality: str = env_field("sonarr_episodefile_quality")
    release_group: str = env_field("sonarr_episodefile_releasegroup")
    download_client: str = env_field("sonarr_download_client")
    episode_path: str = env_field("sonarr_episodefile_path")
    episode_ids: list[int] = env_field("sonarr_episodefile_episodeids", ",")
    scene_name: str = env_field("sonarr_episodefile_scenename")
    episode_numbers: list[int] = env_field("sonarr_episodefile_episodenumbers", ",")
    path: str = env_field("sonarr_series_path")
    file_id: int = env_field("sonarr_episodefile_id")
    source_path: str = env_field("sonarr_episodefile_sourcepath")
    episode_air_dates: list[str] = env_field("sonarr_episodefile_episodeairdates", ",")
    download_id: str = env_field("sonarr_download_id")
    series_type: str = env_field("sonarr_series_type")
    tvdb_id: int = env_field("sonarr_series_tvdbid")
    tvmaze_id: int = env_field("sonarr_series_tvmazeid")
    episode_count: int = env_field("sonarr_episodefile_episodecount")
    season_number: int = env_field("sonarr_episodefile_seasonnumber")
    episode_titles: list[str] = env_field("sonarr_episodefile_episodetitles", "|")
    imdb_id: str = env_field("sonarr_series_imdbid")
    episode_air_dates_utc: list[datetime] = env_field("sonarr_episodefile_episodeairdatesutc", ",")
    relative_path: str = env_field("sonarr_episodefile_relativepath")
    is_upgrade: bool = env_field("sonarr_isupgrade")
    deleted_relative_paths: list[str] = env_field("sonarr_deletedrelativepaths", "|")
    deleted_paths: list[str] = env_field("sonarr_deletedpaths", "|")


@dataclass
class SonarrRename:
    """The Rename event."""

    id: int = env_field("sonarr_series_id")
    title: str = env_field("sonarr_series_title")
    path: str = env_field("sonarr_series_path")
    tvdb_id: int = env_field("sonarr_series_tvdbid")
    tvmaze_id: int = env_field("sonarr_series_tvmazeid")
    imdb_id: str = env_field("sonarr_series_imdbid")
    series_type: str = env_field("sonarr_series_type")
    file_ids: list[int] = env_field("sonarr_episodefile_ids", ",")
    relative_paths: list[str] = env_field("sonarr_episodefile_relativepaths", "|")
    paths: list[str] = env_field("sonarr_episodefile_paths", "|")
    previous_relative_paths: list[str] = env_field("sonarr_episodefile_previousrelativepaths", "|")
    previous_paths: list[str] = env_field("sonarr_episodefile_previouspaths", "|")


@dataclass
class SonarrSeriesDelete:
    """The SeriesDelete event."""

    id: int = env_field("sonarr_series_id")
    title: str = env_field("sonarr_series_title")
    path: str = env_field("sonarr_series_path")
    tvdb_id: int = env_field("sonarr_series_tvdbid")
    tvmaze_id: int = env_field("sonarr_series_tvmazeid")
    imdb_id: str = env_field("sonarr_series_imdbid")
    series_type: str = env_field("sonarr_series_type")
    deleted_files: str = env_field("sonarr_series_deletedfiles")


@dataclass
class SonarrEpisodeFileDelete:
    """The EpisodeFileDelete event."""

    reason: str = env_field("sonarr_episodefile_deletereason")
    id: int = env_field("sonarr_series_id")
    title: str = env_field("sonarr_series_title")
    path: str = env_field("sonarr_series_path")
    tvdb_id: int = env_field("sonarr_series_tvdbid")
    tvmaze_id: int = env_field("sonarr_series_tvmazeid")
    imdb_id: str = env_field("sonarr_series_imdbid")
    series_type: str = env_field("sonarr_series_type")
    file_id: int = env_field("sonarr_episodefile_id")
    episode_count: int = env_field("sonarr_episodefile_episodecount")
    relative_path: str = env_field("sonarr_episodefile_relativepath")
    file_path: str = env_field("sonarr_episodefile_path")
    episode_ids: list[int] = env_field("sonarr_episodefile_episodeids", ",")
    season_number: str = env_field("sonarr_episodefile_seasonnumber")
    episode_numbers: list[int] = env_field("sonarr_episodefile_episodenumbers", ",")
    episode_air_dates: list[str] = env_field("sonarr_episodefile_episodeairdates", ",")
    episode_air_dates_utc: list[datetime] = env_field("sonarr_episodefile_episodeairdatesutc", ",")
    episode_titles: list[str] = env_field("sonarr_episodefile_episodetitles", "|")
    quality: str = env_field("sonarr_episodefile_quality")
    quality_version: str = env_field("sonarr_episodefile_qualityversion")
    release_group: str = env_field("sonarr_episodefile_releasegroup")
    scene_name: str = env_field("sonarr_episodefile_scenename")


@dataclass
class SonarrTest:
    """The Test event; it carries no data."""


def get_sonarr_application_update(
    cmd: CmdEvent, environ: Mapping[str, str] | None = None
) -> SonarrApplicationUpdate:
    """Return the ApplicationUpdate event data."""
    return cmd.get(Event.APPLICATION_UPDATE, SonarrApplicationUpdate, environ)


def get_sonarr_health_issue(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> SonarrHealthIssue:
    """Return the HealthIssue event data."""
    return cmd.get(Event.HEALTH_ISSUE, SonarrHealthIssue, environ)


def get_sonarr_test(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> SonarrTest:
    """Return the Test event data."""
    return cmd.get(Event.TEST, SonarrTest, environ)


def get_sonarr_grab(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> SonarrGrab:
    """Return the Grab event data."""
    return cmd.get(Event.GRAB, SonarrGrab, environ)


def get_sonarr_download(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> SonarrDownload:
    """Return the Download event data."""
    return cmd.get(Event.DOWNLOAD, SonarrDownload, environ)


def get_sonarr_rename(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> SonarrRename:
    """Return the Rename event data."""
    return cmd.get(Event.RENAME, SonarrRename, environ)


def get_sonarr_series_delete(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> SonarrSeriesDelete:
    """Return the SeriesDelete event data."""
    return cmd.get(Event.SERIES_DELETE, SonarrSeriesDelete, environ)


def get_sonarr_episode_file_delete(
    cmd: CmdEvent, environ: Mapping[str, str] | None = None
) -> SonarrEpisodeFileDelete:
    """Return the EpisodeFileDelete event data."""
    return cmd.get(Event.EPISODE_FILE_DELETE, SonarrEpisodeFileDelete, environ)