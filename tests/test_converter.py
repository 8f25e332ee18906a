"""Tests for the CSV and JSON converters."""

import csv
import io
import json

from pocket_bookmarks.converter import (
    CSV_COLUMNS,
    bookmarks_to_csv,
    bookmarks_to_json,
    sorted_bookmarks,
)
from pocket_bookmarks.models import Bookmark


class TestBookmarksToCsv:
    def test_header_row(self, sample_bookmarks):
        result = bookmarks_to_csv(sample_bookmarks)
        header = next(csv.reader(io.StringIO(result)))
        assert header == CSV_COLUMNS

    def test_rows_sorted_by_id(self, sample_bookmarks):
        result = bookmarks_to_csv(sample_bookmarks)
        rows = list(csv.DictReader(io.StringIO(result)))
        assert [r["id"] for r in rows] == ["229279689", "873945612", "1050211032"]

    def test_basic_fields(self, sample_bookmarks):
        rows = list(csv.DictReader(io.StringIO(bookmarks_to_csv(sample_bookmarks))))
        last = rows[-1]
        assert last["title"] == "Understanding Python Protocols"
        assert last["url"] == "https://example.com/python-protocols"

    def test_special_characters_quoted(self):
        bookmarks = {"1": Bookmark(1, 'Commas, "quotes"\nand newlines', "http://x")}
        rows = list(csv.DictReader(io.StringIO(bookmarks_to_csv(bookmarks))))
        assert rows[0]["title"] == 'Commas, "quotes"\nand newlines'

    def test_writes_to_output(self, sample_bookmarks):
        out = io.StringIO()
        result = bookmarks_to_csv(sample_bookmarks, out)
        assert out.getvalue() == result

    def test_empty(self):
        assert bookmarks_to_csv({}).strip() == "id,title,url"


class TestBookmarksToJson:
    def test_keyed_by_id(self, sample_bookmarks):
        data = json.loads(bookmarks_to_json(sample_bookmarks))
        assert set(data) == set(sample_bookmarks)
        assert data["1050211032"] == {
            "id": 1050211032,
            "title": "Understanding Python Protocols",
            "url": "https://example.com/python-protocols",
        }

    def test_unicode_kept(self):
        result = bookmarks_to_json({"1": Bookmark(1, "Café", "http://x")})
        assert "Café" in result


def test_sorted_bookmarks(sample_bookmarks):
    ids = [b.id for b in sorted_bookmarks(sample_bookmarks)]
    assert ids == sorted(ids)
