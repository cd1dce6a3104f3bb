"""Tests for the command line front end, using export files only."""
import json

import pytest

import stats_cli


@pytest.fixture
def export_file(tmp_path):
    data = {
        "books": [
            {"id": "1", "title": "Short Read", "pageCount": 100, "shelf": "read"},
            {"id": "2", "title": "Long Read", "pageCount": 250, "shelf": "read"},
            {"id": "3", "title": "No Pages", "shelf": "read"},
            {"id": "4", "title": "Next Up", "pageCount": 999, "shelf": "to-read"},
            {"id": "1", "title": "Short Read Duplicate", "pageCount": 5000, "shelf": "read"},
        ]
    }
    path = tmp_path / "books.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_pages_json_output(export_file, capsys):
    """Page statistics come from read books with a page count only."""
    stats_cli.main(["pages", "--from-json", export_file, "--format", "json"])

    output = json.loads(capsys.readouterr().out)
    assert output["book_with_most_pages"]["id"] == "2"
    assert output["book_with_least_pages"]["id"] == "1"
    assert output["average_page_length"] == 175


def test_pages_table_output(export_file, capsys):
    stats_cli.main(["pages", "--from-json", export_file])

    out = capsys.readouterr().out
    assert "Long Read (250 pages)" in out
    assert "Average page length" in out


def test_shelf_compact_output(export_file, capsys):
    stats_cli.main(["shelf", "--name", "to-read", "--from-json", export_file, "--format", "compact"])

    assert capsys.readouterr().out.strip() == "1. Next Up - Unknown"


def test_missing_command_exits_with_error():
    with pytest.raises(SystemExit) as excinfo:
        stats_cli.main([])

    assert excinfo.value.code == 1


def test_missing_export_file_exits_with_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        stats_cli.main(["pages", "--from-json", str(tmp_path / "missing.json")])

    assert excinfo.value.code == 1
