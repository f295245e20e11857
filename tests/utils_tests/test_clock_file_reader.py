# tests/utils_tests/test_clock_file_reader.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Tests for reading labelled clocks from CSV files

"""Clock file reader – valid files, header checks and row errors."""

import pytest
from model.vector_clock import VectorClock as VC
from utils.clock_reader import ClockFileError, load_clocks, read_clocks


def write_file(tmp_path, text: str):
    path = tmp_path / "clocks.csv"
    path.write_text(text, encoding="utf-8")
    return path


class TestReadValidFiles:
    def test_round_trip_of_fixture(self, clock_file, sample_clocks):
        assert load_clocks(str(clock_file)) == sample_clocks

    def test_labels_keep_file_order(self, clock_file):
        labels = [label for label, _ in read_clocks(str(clock_file))]
        assert labels == ["c1", "c2", "c3", "c4", "c5"]

    def test_empty_clock_column(self, tmp_path):
        path = write_file(tmp_path, "id,vc\nc1,\nc2\n")
        assert load_clocks(str(path)) == [("c1", VC()), ("c2", VC())]

    def test_extra_columns_are_ignored(self, tmp_path):
        path = write_file(tmp_path, "id,vc,note\nc1,A:1;B:2,first\n")
        assert load_clocks(str(path)) == [("c1", VC({"A": 1, "B": 2}))]

    def test_ids_are_trimmed(self, tmp_path):
        path = write_file(tmp_path, "id,vc\n  c1  , A:1 \n")
        assert load_clocks(str(path)) == [("c1", VC({"A": 1}))]

    def test_header_only_file(self, tmp_path):
        path = write_file(tmp_path, "id,vc\n")
        assert load_clocks(str(path)) == []


class TestReadErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ClockFileError, match="Clock file not found"):
            load_clocks(str(tmp_path / "missing.csv"))

    def test_missing_headers(self, tmp_path):
        path = write_file(tmp_path, "label,clock\nc1,A:1\n")
        with pytest.raises(ClockFileError, match=r"Missing required headers: \['id', 'vc'\]"):
            load_clocks(str(path))

    def test_partially_missing_headers(self, tmp_path):
        path = write_file(tmp_path, "id,clock\nc1,A:1\n")
        with pytest.raises(ClockFileError, match=r"\['vc'\]"):
            load_clocks(str(path))

    def test_malformed_clock_reports_row(self, tmp_path):
        path = write_file(tmp_path, "id,vc\nc1,A:1\nc2,A:x\n")
        with pytest.raises(ClockFileError, match="Error parsing row 3"):
            load_clocks(str(path))

    def test_empty_id(self, tmp_path):
        path = write_file(tmp_path, "id,vc\n,A:1\n")
        with pytest.raises(ClockFileError, match="row 2: empty id"):
            load_clocks(str(path))

    def test_counter_out_of_range(self, tmp_path):
        path = write_file(tmp_path, "id,vc\nc1,A:9223372036854775808\n")
        with pytest.raises(ClockFileError, match="row 2"):
            load_clocks(str(path))

    def test_directory_is_not_a_clock_file(self, tmp_path):
        with pytest.raises(ClockFileError, match="Cannot open clock file"):
            load_clocks(str(tmp_path))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "clocks.csv"
        path.write_bytes(b"id,vc\nc1,A:1\nc2,\xff\xfe\n")
        with pytest.raises(ClockFileError, match="not valid UTF-8"):
            load_clocks(str(path))

    def test_malformed_csv(self, tmp_path):
        path = write_file(tmp_path, "id,vc\nc1," + "A" * 200000 + "\n")
        with pytest.raises(ClockFileError, match="Malformed CSV"):
            load_clocks(str(path))

    def test_duplicate_id_in_clock_column(self, tmp_path):
        path = write_file(tmp_path, "id,vc\nc1,A:1;A:2\n")
        with pytest.raises(ClockFileError, match="row 2: Duplicate id"):
            load_clocks(str(path))

    def test_rows_before_an_error_are_yielded(self, tmp_path):
        path = write_file(tmp_path, "id,vc\nc1,A:1\nc2,bad\n")
        reader = read_clocks(str(path))
        assert next(reader) == ("c1", VC({"A": 1}))
        with pytest.raises(ClockFileError):
            next(reader)
