"""
Basic tests for URL Extractor models, storage and table state
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from urlextractor.core.config import ExtractorConfig
from urlextractor.core.utils import is_valid_url, truncate_text, get_relative_time
from urlextractor.exceptions import RecordValidationError, StorageError
from urlextractor.models.record import ExtractionRecord, RecordStatus, parse_timestamp
from urlextractor.storage import InMemoryStorage, LocalStorage, RecordStore
from urlextractor.views.table import (
    TableState, SortField, SortDirection, StatusFilter, EmptyState, build_row, format_key_points,
)

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_record(title="Example", summary="A simple page", url="https://example.com",
                key_points=("one",), minutes=0, status=RecordStatus.SUCCESS):
    timestamp = T0 + timedelta(minutes=minutes)
    if status == RecordStatus.ERROR:
        return ExtractionRecord(title=title, summary=summary, url=url, timestamp=timestamp,
                                status=status, error=summary)
    return ExtractionRecord(title=title, summary=summary, url=url, key_points=key_points,
                            timestamp=timestamp)


class TestExtractorConfig:
    """Test configuration system"""

    def test_default_config(self):
        """Test default configuration values"""
        config = ExtractorConfig()

        assert config.base_url == "http://localhost:8000"
        assert config.extract_url == "http://localhost:8000/api/extract"
        assert config.storage_key == "aicontent"
        assert config.request_timeout is None
        assert config.auto_save is True

    def test_config_validation(self):
        """Test configuration validation"""
        with pytest.raises(ValueError):
            ExtractorConfig(base_url="localhost:8000")

        with pytest.raises(ValueError):
            ExtractorConfig(request_timeout=0)

    def test_trailing_slash_is_dropped(self):
        config = ExtractorConfig(base_url="https://api.example.com/")
        assert config.extract_url == "https://api.example.com/api/extract"

    def test_from_env(self, monkeypatch):
        """Test environment overrides"""
        monkeypatch.setenv("URL_EXTRACTOR_BASE_URL", "https://extract.example.com")
        monkeypatch.setenv("URL_EXTRACTOR_TIMEOUT", "12.5")
        monkeypatch.setenv("URL_EXTRACTOR_AUTO_SAVE", "no")

        config = ExtractorConfig.from_env(base_url="http://ignored:1")

        assert config.base_url == "https://extract.example.com"
        assert config.request_timeout == 12.5
        assert config.auto_save is False

    def test_from_env_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("URL_EXTRACTOR_BASE_URL", raising=False)
        assert ExtractorConfig.from_env().base_url == "http://localhost:8000"


class TestUrlValidation:
    """Test client-side URL syntax checks"""

    @pytest.mark.parametrize("url", [
        "https://example.com",
        "http://localhost:8000/path?q=1",
        "  https://news.ycombinator.com  ",
        "ftp://files.example.org/readme.txt",
        "http:example.com",
        "https:/example.com/page",
        "mailto:someone@example.com",
    ])
    def test_valid_urls(self, url):
        assert is_valid_url(url) is True

    @pytest.mark.parametrize("url", [
        "",
        "   ",
        "not a url",
        "example.com",
        "https://",
        "http://exa mple.com",
        "https://example.com:notaport",
        "http:",
        "https:///",
        "file:readme.txt",
    ])
    def test_invalid_urls(self, url):
        assert is_valid_url(url) is False


class TestTextHelpers:
    """Test truncation and relative time formatting"""

    def test_truncate_text(self):
        assert truncate_text("short", 10) == "short"
        assert truncate_text("exactly10!", 10) == "exactly10!"
        assert truncate_text("a" * 30, 25) == "a" * 25 + "..."

    def test_relative_time(self):
        now = T0 + timedelta(hours=5)
        assert get_relative_time(now - timedelta(seconds=10), now=now) == "just now"
        assert get_relative_time(now - timedelta(minutes=5), now=now) == "5m ago"
        assert get_relative_time(now - timedelta(hours=3), now=now) == "3h ago"
        assert get_relative_time(now - timedelta(days=2), now=now) == "2d ago"


class TestExtractionRecord:
    """Test extraction record model"""

    def test_record_creation(self):
        """Test record creation"""
        record = make_record(key_points=["one", "two"])

        assert record.title == "Example"
        assert record.key_points == ("one", "two")
        assert record.status == RecordStatus.SUCCESS
        assert record.error is None
        assert record.is_success

    def test_record_is_immutable(self):
        record = make_record()
        with pytest.raises(AttributeError):
            record.title = "Changed"

    def test_error_invariants(self):
        """Test that error is set if and only if status is error"""
        with pytest.raises(ValueError):
            ExtractionRecord(title="Error", summary="x", url="u", status=RecordStatus.ERROR)

        with pytest.raises(ValueError):
            ExtractionRecord(title="t", summary="s", url="u", error="boom")

        with pytest.raises(ValueError):
            ExtractionRecord(title="Error", summary="x", url="u", key_points=("a",),
                             status=RecordStatus.ERROR, error="x")

    def test_failed_record(self):
        record = ExtractionRecord.failed("https://example.com", "fetch failed")

        assert record.title == "Error"
        assert record.summary == "fetch failed"
        assert record.error == "fetch failed"
        assert record.key_points == ()
        assert record.is_error

    def test_from_dict_server_shape(self):
        """Test parsing a success body without status"""
        record = ExtractionRecord.from_dict(
            {"title": "Example", "summary": "A simple page", "keyPoints": ["one"],
             "url": "https://example.com"}
        )
        assert record.status == RecordStatus.SUCCESS
        assert record.key_points == ("one",)

    def test_from_dict_uses_default_url(self):
        record = ExtractionRecord.from_dict(
            {"title": "t", "summary": "s", "keyPoints": []}, default_url="https://example.com"
        )
        assert record.url == "https://example.com"

    def test_from_dict_honors_server_error_status(self):
        record = ExtractionRecord.from_dict(
            {"title": "Error", "summary": "blocked", "keyPoints": ["x"], "url": "u", "status": "error"}
        )
        assert record.is_error
        assert record.error == "blocked"
        assert record.key_points == ()

    @pytest.mark.parametrize("payload", [
        None,
        [],
        {"summary": "s", "keyPoints": [], "url": "u"},
        {"title": "t", "summary": 3, "keyPoints": [], "url": "u"},
        {"title": "t", "summary": "s", "keyPoints": "one", "url": "u"},
        {"title": "t", "summary": "s", "keyPoints": [1], "url": "u"},
        {"title": "t", "summary": "s", "keyPoints": []},
        {"title": "t", "summary": "s", "keyPoints": [], "url": "u", "status": "pending"},
    ])
    def test_from_dict_rejects_malformed_payloads(self, payload):
        with pytest.raises(RecordValidationError):
            ExtractionRecord.from_dict(payload)

    def test_dict_round_trip(self):
        record = make_record(key_points=["one", "two"])
        assert ExtractionRecord.from_dict(record.to_dict()) == record

    def test_parse_browser_timestamps(self):
        """Test timestamps written by the original browser client"""
        assert parse_timestamp("2024-05-01T12:00:00.000Z") == T0
        assert parse_timestamp(int(T0.timestamp() * 1000)) == T0
        assert parse_timestamp("2024-05-01T12:00:00") == T0

        with pytest.raises(RecordValidationError):
            parse_timestamp("yesterday")


class TestLocalStorage:
    """Test JSON file backed key-value storage"""

    def test_set_get_remove(self, tmp_path):
        storage = LocalStorage(tmp_path / "store" / "storage.json")

        assert storage.get_item("aicontent") is None

        storage.set_item("aicontent", "[]")
        storage.set_item("other", "x")
        assert storage.get_item("aicontent") == "[]"
        assert sorted(storage.keys()) == ["aicontent", "other"]

        reopened = LocalStorage(tmp_path / "store" / "storage.json")
        assert reopened.get_item("other") == "x"

        assert reopened.remove_item("other") is True
        assert reopened.remove_item("other") is False

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json")

        storage = LocalStorage(path)
        assert storage.get_item("aicontent") is None

    def test_write_failure_raises_storage_error(self, tmp_path):
        path = tmp_path / "storage.json"
        storage = LocalStorage(path)
        path.mkdir()

        with pytest.raises(StorageError):
            storage.set_item("aicontent", "[]")


    def test_storage_stats(self, tmp_path):
        storage = LocalStorage(tmp_path / "storage.json")
        assert storage.get_storage_stats()["file_size"] == 0

        storage.set_item("aicontent", "[]")
        stats = storage.get_storage_stats()
        assert stats["backend"] == "LocalStorage"
        assert stats["keys"] == 1
        assert stats["file_size"] > 0

        assert InMemoryStorage({"a": "1"}).get_storage_stats() == {"backend": "InMemoryStorage", "keys": 1}


class TestRecordStore:
    """Test the record history"""

    def test_prepend_keeps_most_recent_first(self):
        store = RecordStore()
        first = make_record(title="first")
        second = make_record(title="second", minutes=1)

        store.prepend(first)
        store.prepend(second)

        assert [r.title for r in store] == ["second", "first"]
        assert len(store) == 2

    def test_counts(self):
        store = RecordStore()
        store.prepend(make_record())
        store.prepend(make_record(title="Error", summary="boom", status=RecordStatus.ERROR))
        store.prepend(make_record())

        assert store.success_count() == 2
        assert store.error_count() == 1

    def test_save_and_restore(self):
        storage = InMemoryStorage()
        store = RecordStore(storage)
        store.prepend(make_record(title="older"))
        store.prepend(make_record(title="newer", minutes=5))
        store.save()

        restored = RecordStore(storage)
        assert restored.restore() == 2
        assert [r.title for r in restored] == ["newer", "older"]
        assert restored.records[0].timestamp == T0 + timedelta(minutes=5)

    def test_restore_missing_key_is_empty(self):
        store = RecordStore(InMemoryStorage())
        assert store.restore() == 0
        assert store.records == []

    @pytest.mark.parametrize("raw", ["{not json", '{"title": "x"}', "42", ""])
    def test_restore_malformed_payload_is_empty(self, raw):
        store = RecordStore(InMemoryStorage({"aicontent": raw}))
        store.prepend(make_record())

        assert store.restore() == 0
        assert store.records == []

    def test_restore_skips_malformed_entries(self):
        good = make_record().to_dict()
        raw = json.dumps([good, {"title": 1}, "junk"])
        store = RecordStore(InMemoryStorage({"aicontent": raw}))

        assert store.restore() == 1
        assert store.records[0].title == "Example"

    def test_save_without_backend_raises(self):
        with pytest.raises(StorageError):
            RecordStore().save()

    def test_erase(self):
        storage = InMemoryStorage()
        store = RecordStore(storage)
        store.prepend(make_record())
        store.save()

        store.erase()

        assert len(store) == 0
        assert storage.get_item("aicontent") is None


class TestTableState:
    """Test search, filter and sort of the results table"""

    def setup_method(self):
        self.records = [
            make_record(title="banana", summary="yellow fruit", url="https://b.example", minutes=1),
            make_record(title="Apple", summary="red fruit", url="https://a.example", minutes=2),
            make_record(title="Error", summary="fetch failed", url="https://c.example", minutes=0,
                        status=RecordStatus.ERROR),
        ]

    def test_default_sort_newest_first(self):
        state = TableState()
        titles = [r.title for r in state.apply(self.records)]

        assert state.sort_field == SortField.TIMESTAMP
        assert state.sort_direction == SortDirection.DESC
        assert titles == ["Apple", "banana", "Error"]

    def test_toggle_same_field_reverses(self):
        state = TableState()
        state.toggle_sort(SortField.TIMESTAMP)

        assert state.sort_direction == SortDirection.ASC
        assert [r.title for r in state.apply(self.records)] == ["Error", "banana", "Apple"]

    def test_new_field_resets_to_descending(self):
        state = TableState()
        state.toggle_sort(SortField.TIMESTAMP)
        state.toggle_sort(SortField.TITLE)

        assert state.sort_field == SortField.TITLE
        assert state.sort_direction == SortDirection.DESC
        assert [r.title for r in state.apply(self.records)] == ["Error", "banana", "Apple"]

        state.toggle_sort(SortField.TITLE)
        assert [r.title for r in state.apply(self.records)] == ["Apple", "banana", "Error"]

    def test_sort_by_status(self):
        state = TableState(sort_field=SortField.STATUS, sort_direction=SortDirection.ASC)
        assert [r.status for r in state.apply(self.records)][0] == RecordStatus.ERROR

    def test_search_matches_summary_case_insensitive(self):
        state = TableState()
        state.set_search("YELLOW")

        result = state.apply(self.records)
        assert [r.title for r in result] == ["banana"]

    def test_search_matches_url(self):
        state = TableState(search_term="a.example")
        assert [r.title for r in state.apply(self.records)] == ["Apple"]

    def test_search_without_match_gives_no_matches_state(self):
        state = TableState(search_term="kiwi")

        assert state.apply(self.records) == []
        assert state.empty_state(self.records) == EmptyState.NO_MATCHES

    def test_empty_history_state(self):
        assert TableState().empty_state([]) == EmptyState.NO_CONTENT
        assert TableState(search_term="kiwi").empty_state([]) == EmptyState.NO_CONTENT
        assert TableState().empty_state(self.records) == EmptyState.NONE

    def test_status_filter(self):
        state = TableState()
        state.set_status_filter(StatusFilter.ERROR)
        assert [r.status for r in state.apply(self.records)] == [RecordStatus.ERROR]

        state.set_status_filter(StatusFilter.SUCCESS)
        assert len(state.apply(self.records)) == 2

    def test_result_count_text(self):
        state = TableState(status_filter=StatusFilter.ERROR)
        assert state.result_count_text(self.records) == "Showing 1 of 3 results"

    def test_sort_indicator(self):
        state = TableState()
        assert state.sort_indicator(SortField.TIMESTAMP) == " ▼"
        assert state.sort_indicator(SortField.TITLE) == ""

    def test_details_selection(self):
        state = TableState()
        state.open_details(self.records[0])
        assert state.selected is self.records[0]
        state.close_details()
        assert state.selected is None


class TestRowFormatting:
    """Test truncated table cells"""

    def test_cells_are_truncated(self):
        record = make_record(title="t" * 60, summary="s" * 80, url="https://example.com/" + "p" * 20,
                             key_points=["k" * 50])
        row = build_row(record)

        assert row.title == "t" * 50 + "..."
        assert row.summary == "s" * 70 + "..."
        assert row.url == record.url[:25] + "..."
        assert row.key_points == ["• " + "k" * 40 + "..."]

    def test_extra_key_points_collapse(self):
        lines = format_key_points(["a", "b", "c", "d", "e"])
        assert lines == ["• a", "• b", "• c", "+2 more"]

    def test_no_key_points(self):
        row = build_row(make_record(key_points=()))
        assert row.key_points == []
        assert row.key_points_text == "No key points"
