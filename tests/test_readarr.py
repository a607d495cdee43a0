from datetime import datetime, timezone

import pytest

from starr.starrcmd.event import App, Event, InvalidEventError, new
from starr.starrcmd.parser import EnvParseError
from starr.starrcmd.readarr import (
    ReadarrTest,
    get_readarr_application_update,
    get_readarr_author_delete,
    get_readarr_book_delete,
    get_readarr_book_file_delete,
    get_readarr_download,
    get_readarr_grab,
    get_readarr_health_issue,
    get_readarr_rename,
    get_readarr_test,
    get_readarr_track_retag,
)


def _env(event, **values):
    env = {"readarr_eventtype": event.value}
    env.update(values)
    return env


def test_application_update():
    env = _env(
        Event.APPLICATION_UPDATE,
        readarr_update_previousversion="6.0.3.5875",
        readarr_update_newversion="6.0.4.5909",
        readarr_update_message="Readarr updated from 6.0.3.5875 to 6.0.4.5909",
    )
    cmd = new(env)
    assert cmd.app == App.READARR
    info = get_readarr_application_update(cmd, env)
    assert info.message == "Readarr updated from 6.0.3.5875 to 6.0.4.5909"
    assert info.new_version == "6.0.4.5909"
    assert info.previous_version == "6.0.3.5875"


def test_health_issue():
    env = _env(
        Event.HEALTH_ISSUE,
        readarr_health_issue_type="SomeIssueTypeForReadarr",
        readarr_health_issue_wiki="https://wiki.example.com/readarr",
        readarr_health_issue_level="Info",
        readarr_health_issue_message="Lists unavailable due to failures: List name here",
    )
    info = get_readarr_health_issue(new(env), env)
    assert info.message == "Lists unavailable due to failures: List name here"
    assert info.wiki == "https://wiki.example.com/readarr"
    assert info.level == "Info"
    assert info.issue_type == "SomeIssueTypeForReadarr"


def test_test_event():
    env = _env(Event.TEST)
    assert get_readarr_test(new(env), env) == ReadarrTest()


def test_grab():
    env = _env(
        Event.GRAB,
        readarr_author_grid="1077326",
        readarr_release_releasegroup="BitBook",
        readarr_author_name="J.K. Rowling",
        readarr_release_title="J K Rowling - Harry Potter and the Order of the Phoenix",
        readarr_release_grids="21175582 // not sure what this looks like with 2+",
        readarr_download_client="qBittorrent",
        readarr_release_size="1279262",
        readarr_release_qualityversion="1",
        readarr_release_booktitles="Harry Potter and the Order of the Phoenix",
        readarr_release_bookids="649",
        readarr_release_indexer="InfoWars (Prowlarr)",
        readarr_download_id="3852BA2204A84185B2B43281E53BE93D56DE5C81",
        readarr_release_bookcount="1",
        readarr_release_bookreleasedates="07/10/2003 07:00:00",
        readarr_release_quality="EPUB",
        readarr_author_id="4",
    )
    info = get_readarr_grab(new(env), env)
    assert info.author_name == "J.K. Rowling"
    assert info.author_grid == 1077326
    assert info.size == 1279262
    assert info.quality_version == "1"
    assert info.titles == ["Harry Potter and the Order of the Phoenix"]
    assert info.ids == [649]
    assert info.book_count == 1
    assert info.release_dates == [datetime(2003, 7, 10, 7, 0, 0, tzinfo=timezone.utc)]
    assert info.author_id == 4


def test_book_delete():
    env = _env(
        Event.BOOK_DELETE,
        readarr_author_name="Alyssa Cole",
        readarr_book_goodreadsid="88514853",
        readarr_author_goodreadsid="7790155",
        readarr_book_title="Unti Cole #6: A Novel",
        readarr_author_path="/books/Alyssa Cole",
        readarr_book_id="636",
        readarr_book_deletedfiles="True",
        readarr_author_id="33",
    )
    info = get_readarr_book_delete(new(env), env)
    assert info.author_name == "Alyssa Cole"
    assert info.gr_id == 88514853
    assert info.id == 636
    assert info.deleted_files is True
    assert info.author_id == "33"


def test_book_file_delete():
    env = _env(
        Event.BOOK_FILE_DELETE,
        readarr_delete_reason="deleteMessage.Reason.ToString())",
        readarr_author_id="54756546",
        readarr_author_name="author.Name)",
        readarr_author_goodreadsid="34234234",
        readarr_book_id="456454345",
        readarr_book_title="book.Title)",
        readarr_book_goodreadsid="324324234",
        readarr_bookfile_id="7323445",
        readarr_bookfile_path="bookFile.Path)",
        readarr_bookfile_quality="bookFile.Quality.Quality.Name)",
        readarr_bookfile_qualityversion="1",
        readarr_bookfile_releasegroup="bookFile.ReleaseGroup ?? string.Empty)",
        readarr_bookfile_scenename="bookFile.SceneName ?? string.Empty)",
        readarr_bookfile_edition_id="213123",
        readarr_bookfile_edition_name="edition.Title)",
        readarr_bookfile_edition_goodreadsid="324234",
        readarr_bookfile_edition_isbn13="edition.Isbn13)",
        readarr_bookfile_edition_asin="edition.Asin)",
    )
    info = get_readarr_book_file_delete(new(env), env)
    assert info.author_name == "author.Name)"
    assert info.id == "456454345"
    assert info.edition_id == 213123
    assert info.quality_version == 1


def test_author_delete():
    env = _env(
        Event.AUTHOR_DELETE,
        readarr_author_id="34534534",
        readarr_author_name="author.Name)",
        readarr_author_path="author.Path)",
        readarr_author_goodreadsid="234234234",
        readarr_author_deletedfiles="False",
    )
    info = get_readarr_author_delete(new(env), env)
    assert info.author_name == "author.Name)"
    assert info.author_id == 34534534
    assert info.deleted_files is False


def test_rename():
    env = _env(
        Event.RENAME,
        readarr_author_id="16128787",
        readarr_author_name="author.Metadata.Value.Name)",
        readarr_author_path="author.Path)",
        readarr_author_grid="234234234",
    )
    info = get_readarr_rename(new(env), env)
    assert info.author_name == "author.Metadata.Value.Name)"
    assert info.author_gr_id == 234234234


def test_download():
    env = _env(
        Event.DOWNLOAD,
        readarr_author_id="9182398",
        readarr_author_name="le author",
        readarr_author_path="author.Path)",
        readarr_author_grid="2234234",
        readarr_book_id="012338",
        readarr_book_title="book.Title)",
        readarr_book_grid="123123123",
        readarr_book_releasedate="09/01/2003 07:00:00",
        readarr_download_client="message.DownloadClient ?? string.Empty)",
        readarr_download_id="message.DownloadId ?? string.Empty)",
        readarr_addedbookpaths="",
        readarr_deletedpaths="",
    )
    info = get_readarr_download(new(env), env)
    assert info.author_name == "le author"
    assert info.id == 12338
    assert info.release_date == "09/01/2003 07:00:00"
    assert info.added_book_paths == []
    assert info.deleted_paths == []


def test_track_retag():
    env = _env(
        Event.TRACK_RETAG,
        readarr_author_id="1232131313",
        readarr_author_name="write here",
        readarr_author_path="author.Path)",
        readarr_author_grid="324324",
        readarr_book_id="676757",
        readarr_book_title="book.Title)",
        readarr_book_grid="123123123",
        readarr_book_releasedate="11/11/2003 17:00:00",
        readarr_bookfile_id="4565665",
        readarr_bookfile_path="bookFile.Path)",
        readarr_bookfile_quality="bookFile.Quality.Quality.Name)",
        readarr_bookfile_qualityversion="1",
        readarr_bookfile_releasegroup="bookFile.ReleaseGroup ?? string.Empty)",
        readarr_bookfile_scenename="bookFile.SceneName ?? string.Empty)",
        readarr_tags_diff="message.Diff.ToJson())",
        readarr_tags_scrubbed="False",
    )
    info = get_readarr_track_retag(new(env), env)
    assert info.author_name == "write here"
    assert info.release_date == datetime(2003, 11, 11, 17, 0, 0, tzinfo=timezone.utc)
    assert info.scrubbed is False
    assert info.file_id == 4565665


def test_wrong_event_raises():
    env = _env(Event.RENAME)
    with pytest.raises(InvalidEventError):
        get_readarr_grab(new(env), env)


def test_bad_integer_raises():
    env = _env(Event.RENAME, readarr_author_id="not a number")
    with pytest.raises(EnvParseError):
        get_readarr_rename(new(env), env)