"""Convert retrieved bookmarks to CSV or JSON."""

import csv
import io
import json
from collections.abc import Mapping
from dataclasses import asdict
from typing import TextIO

from .models import Bookmark

CSV_COLUMNS = ["id", "title", "url"]


def sorted_bookmarks(bookmarks: Mapping[str, Bookmark]) -> list[Bookmark]:
    """Bookmarks ordered by numeric id."""
    return sorted(bookmarks.values(), key=lambda b: b.id)


def bookmarks_to_csv(
    bookmarks: Mapping[str, Bookmark], output: TextIO | None = None
) -> str:
    """Convert bookmarks to CSV format.

    Args:
        bookmarks: Mapping of item_id to Bookmark, as returned by retrieve.
        output: Optional file-like object to write to. If None, returns CSV as string.

    Returns:
        CSV content as a string (also written to output if provided).
    """
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_COLUMNS, quoting=csv.QUOTE_MINIMAL)
    writer.writeheader()

    for b in sorted_bookmarks(bookmarks):
        writer.writerow({"id": b.id, "title": b.title, "url": b.url})

    result = buf.getvalue()
    if output is not None:
        output.write(result)
    return result


def bookmarks_to_json(bookmarks: Mapping[str, Bookmark]) -> str:
    """Serialize bookmarks as a JSON object keyed by item_id."""
    data = {key: asdict(b) for key, b in bookmarks.items()}
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
