import pytest

from table_loader import TableLoader, TableLoadError


def test_load_csv_keeps_strings(tmp_path):
    path = tmp_path / "rows.csv"
    path.write_text("name,qty\nfoo,1\nbar,\n007,NA\n", encoding="utf-8")
    header, rows = TableLoader(str(path)).load()
    assert header == ["name", "qty"]
    assert rows == [["foo", "1"], ["bar", ""], ["007", "NA"]]


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert TableLoader(str(path)).load() == ([], [])


def test_load_header_only(tmp_path):
    path = tmp_path / "header.csv"
    path.write_text("a,b\n", encoding="utf-8")
    assert TableLoader(str(path)).load() == (["a", "b"], [])


def test_unsupported_extension():
    with pytest.raises(TableLoadError):
        TableLoader("rows.txt")


def test_missing_file(tmp_path):
    with pytest.raises(TableLoadError):
        TableLoader(str(tmp_path / "missing.csv")).load()


def test_directory_path_is_rejected(tmp_path):
    path = tmp_path / "dir.csv"
    path.mkdir()
    with pytest.raises(TableLoadError):
        TableLoader(str(path)).load()


def test_undecodable_csv_raises_load_error(tmp_path):
    path = tmp_path / "bytes.csv"
    path.write_bytes(b"\xff\xfe\xfa\x00a,b\n")
    with pytest.raises(TableLoadError) as exc:
        TableLoader(str(path)).load()
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_malformed_csv_raises_load_error(tmp_path):
    path = tmp_path / "broken.csv"
    path.write_text('a,b\n"unterminated,1\n', encoding="utf-8")
    with pytest.raises(TableLoadError):
        TableLoader(str(path)).load()


def test_corrupt_xlsx_raises_load_error(tmp_path):
    pytest.importorskip("openpyxl")
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"not a zip archive")
    with pytest.raises(TableLoadError):
        TableLoader(str(path)).load()
