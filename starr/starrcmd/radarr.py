"""Radarr custom script events and readers for their environment data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from starr.starrcmd.event import CmdEvent, Event
from starr.starrcmd.parser import env_field


@dataclass
class RadarrApplicationUpdate:
    """The ApplicationUpdate event."""

    previous_version: str = env_field("radarr_update_previousversion")
    new_version: str = env_field("radarr_update_newversion")
    message: str = env_field("radarr_update_message")


@dataclass
class RadarrDownload:
    """The Download event."""

    release_date: datetime | None = env_field("radarr_movie_physical_release_date")
    file_path: str = env_field("radarr_moviefile_path")
    imdb_id: str = env_field("radarr_movie_imdbid")
    scene_name: str = env_field("radarr_moviefile_scenename")
    file_id: int = env_field("radarr_moviefile_id")
    release_group: str = env_field("radarr_moviefile_releasegroup")
    download_id: str = env_field("radarr_download_id")
    in_cinemas: datetime | None = env_field("radarr_movie_in_cinemas_date")
    source_folder: str = env_field("radarr_moviefile_sourcefolder")
    year: int = env_field("radarr_movie_year")
    is_upgrade: bool = env_field("radarr_isupgrade")
    path: str = env_field("radarr_movie_path")
    relative_path: str = env_field("radarr_moviefile_relativepath")
    download_client: str = env_field("radarr_download_client")
    source_path: str = env_field("radarr_moviefile_sourcepath")
    tmdb_id: int = env_field("radarr_movie_tmdbid")
    id: int = env_field("radarr_movie_id")
    quality: str = env_field("radarr_moviefile_quality")
    title: str = env_field("radarr_movie_title")
    quality_version: int = env_field("radarr_moviefile_qualityversion")
    deleted_relative_paths: list[str] = env_field("radarr_deletedrelativepaths", "|")
    deleted_paths: list[str] = env_field("radarr_deletedpaths", "|")


@dataclass
class RadarrGrab:
    """The Grab event."""

    quality_version: int = env_field("radarr_release_qualityversion")
    release_date: datetime | None = env_field("radarr_movie_physical_release_date")
    release_group: str = env_field("radarr_release_releasegroup")
    indexer_flags: int = env_field("radarr_indexerflags")
    imdb_id: str = env_field("radarr_movie_imdbid")
    download_id: str = env_field("radarr_download_id")
    release_title: str = env_field("radarr_release_title")
    in_cinemas: datetime | None = env_field("radarr_movie_in_cinemas_date")
    quality: str = env_field("radarr_release_quality")
    size: int = env_field("radarr_release_size")
    year: int = env_field("radarr_movie_year")
    download_client: str = env_field("radarr_download_client")
    tmdb_id: int = env_field("radarr_movie_tmdbid")
    id: int = env_field("radarr_movie_id")
    release_indexer: str = env_field("radarr_release_indexer")
    title: str = env_field("radarr_movie_title")


@dataclass
class RadarrHealthIssue:
    """The HealthIssue event."""

    message: str = env_field("radarr_health_issue_message")
    issue_type: str = env_field("radarr_health_issue_type")
    wiki: str = env_field("radarr_health_issue_wiki")
    level: str = env_field("radarr_health_issue_level")


@dataclass
class RadarrMovieFileDelete:
    """The MovieFileDelete event."""

    reason: str = env_field("radarr_moviefile_deletereason")
    file_path: str = env_field("radarr_moviefile_path")
    scene_name: str = env_field("radarr_moviefile_scenename")
    imdb_id: str = env_field("radarr_movie_imdbid")
    file_id: int = env_field("radarr_moviefile_id")
    release_group: str = env_field("radarr_moviefile_releasegroup")
    year: int = env_field("radarr_movie_year")
    path: str = env_field("radarr_movie_path")
    relative_path: str = env_field("radarr_moviefile_relativepath")
    size: int = env_field("radarr_moviefile_size")
    tmdb_id: str = env_field("radarr_movie_tmdbid")
    id: int = env_field("radarr_movie_id")
    quality: str = env_field("radarr_moviefile_quality")
    title: str = env_field("radarr_movie_title")
    quality_version: int = env_field("radarr_moviefile_qualityversion")


@dataclass
class RadarrMovieDelete:
    """The MovieDelete event."""

    id: int = env_field("radarr_movie_id")
    title: str = env_field("radarr_movie_title")
    year: int = env_field("radarr_movie_year")
    path: str = env_field("radarr_movie_path")
    imdb_id: str = env_field("radarr_movie_imdbid")
    tmdb_id: int = env_field("radarr_movie_tmdbid")
    size: int = env_field("radarr_movie_folder_size")
    delete_files: str = env_field("radarr_movie_deletedfiles")


@dataclass
class RadarrRename:
    """The Rename event."""

    id: int = env_field("radarr_movie_id")
    year: int = env_field("radarr_movie_year")
    path: str = env_field("radarr_movie_path")
    imdb_id: str = env_field("radarr_movie_imdbid")
    tmdb_id: int = env_field("radarr_movie_tmdbid")
    in_cinemas: datetime | None = env_field("radarr_movie_in_cinemas_date")
    release_date: datetime | None = env_field("radarr_movie_physical_release_date")
    file_ids: list[int] = env_field("radarr_moviefile_ids", ",")
    relative_paths: list[str] = env_field("radarr_moviefile_relativepaths", "|")
    paths: list[str] = env_field("radarr_moviefile_paths", "|")
    previous_relative_paths: list[str] = env_field("radarr_moviefile_previousrelativepaths", "|")
    previous_paths: list[str] = env_field("radarr_moviefile_previouspaths", "|")


@dataclass
class RadarrTest:
    """The Test event; it carries no data."""


def get_radarr_health_issue(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> RadarrHealthIssue:
    """Return the HealthIssue event data."""
    return cmd.get(Event.HEALTH_ISSUE, RadarrHealthIssue, environ)


def get_radarr_application_update(
    cmd: CmdEvent, environ: Mapping[str, str] | None = None
) -> RadarrApplicationUpdate:
    """Return the ApplicationUpdate event data."""
    return cmd.get(Event.APPLICATION_UPDATE, RadarrApplicationUpdate, environ)


def get_radarr_download(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> RadarrDownload:
    """Return the Download event data."""
    return cmd.get(Event.DOWNLOAD, RadarrDownload, environ)


def get_radarr_grab(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> RadarrGrab:
    """Return the Grab event data."""
    return cmd.get(Event.GRAB, RadarrGrab, environ)


def get_radarr_movie_file_delete(
    cmd: CmdEvent, environ: Mapping[str, str] | None = None
) -> RadarrMovieFileDelete:
    """Return the MovieFileDelete event data."""
    return cmd.get(Event.MOVIE_FILE_DELETE, RadarrMovieFileDelete, environ)


def get_radarr_test(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> RadarrTest:
    """Return the Test event data."""
    return cmd.get(Event.TEST, RadarrTest, environ)


def get_radarr_movie_delete(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> RadarrMovieDelete:
    """Return the MovieDelete event data."""
    return cmd.get(Event.MOVIE_DELETE, RadarrMovieDelete, environ)


def get_radarr_rename(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> RadarrRename:
    """Return the Rename event data."""
    return cmd.get(Event.RENAME, RadarrRename, environ)