from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from tagcloud.cloud.frequency import count_words, read_word_counts, write_frequency_csv, write_frequency_parquet


def test_count_words_is_case_insensitive_and_skips_separators() -> None:
    counts = count_words(["The cat -- the CAT!", "", "dog"])

    assert dict(counts) == {"the": 2, "cat": 2, "dog": 1}


def test_count_words_counts_maximal_runs_only() -> None:
    counts = count_words(["cats cat category"])

    assert dict(counts) == {"cats": 1, "cat": 1, "category": 1}


def test_count_words_result_is_read_only() -> None:
    counts = count_words(["a b a"])

    with pytest.raises(TypeError):
        counts["a"] = 10  # type: ignore[index]


def test_count_words_of_empty_input() -> None:
    assert len(count_words([])) == 0


def test_read_word_counts(sample_file: Path) -> None:
    counts = read_word_counts(sample_file)

    assert dict(counts) == {"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}


def test_read_word_counts_with_custom_separators(tmp_path: Path) -> None:
    path = tmp_path / "dotted.txt"
    path.write_text("a.b a.b c\n", encoding="utf-8")

    assert dict(read_word_counts(path, separators=" \n")) == {"a.b": 2, "c": 1}


def test_read_word_counts_missing_file_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_word_counts(tmp_path / "missing.txt")


def test_read_word_counts_replaces_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"alpha beta alpha\n" * 500 + b"caf\xe9 gamma\n")

    counts = read_word_counts(path, encoding="utf-8")

    assert counts["alpha"] == 1000
    assert counts["beta"] == 500
    assert counts["gamma"] == 1
    assert counts["caf\ufffd"] == 1


class _FailingHandle:
    """Yields the given lines, then fails like a broken device."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = lines

    def __enter__(self) -> _FailingHandle:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def __iter__(self) -> Iterator[str]:
        yield from self.lines
        raise OSError("device went away")


def test_read_word_counts_keeps_partial_counts_on_read_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    handle = _FailingHandle(["the cat\n", "the dog\n"])
    monkeypatch.setattr(Path, "open", lambda self, *args, **kwargs: handle)

    with caplog.at_level(logging.ERROR):
        counts = read_word_counts(tmp_path / "flaky.txt")

    assert dict(counts) == {"the": 2, "cat": 1, "dog": 1}
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_read_word_counts_read_error_before_first_line_yields_empty_map(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    handle = _FailingHandle([])
    monkeypatch.setattr(Path, "open", lambda self, *args, **kwargs: handle)

    assert len(read_word_counts(tmp_path / "flaky.txt")) == 0


def test_write_frequency_csv(tmp_path: Path) -> None:
    output = tmp_path / "reports" / "freq.csv"
    write_frequency_csv({"b": 2, "a": 2, "c": 5}, output)

    with output.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.DictReader(handle))

    assert [(row["rank"], row["word"], row["frequency"]) for row in rows] == [
        ("1", "c", "5"),
        ("2", "a", "2"),
        ("3", "b", "2"),
    ]


def test_write_frequency_parquet(tmp_path: Path) -> None:
    output = tmp_path / "reports" / "freq.parquet"
    write_frequency_parquet({"b": 2, "a": 2, "c": 5}, output)

    table = pq.read_table(output).to_pydict()

    assert table == {"word": ["c", "a", "b"], "frequency": [5, 2, 2]}
