from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from gridsnake.scores import BestScoreStore


def test_missing_file_reads_as_zero(store: BestScoreStore) -> None:
    assert store.load() == 0


def test_save_writes_fixed_key_and_round_trips(store: BestScoreStore) -> None:
    assert store.save(4) is True

    assert json.loads(store.path.read_text(encoding="utf-8")) == {"highScore": 4}
    assert BestScoreStore(store.path).load() == 4


def test_save_ignores_values_that_do_not_beat_best(store: BestScoreStore) -> None:
    store.save(5)

    assert store.save(5) is False
    assert store.save(2) is False
    assert BestScoreStore(store.path).load() == 5


@pytest.mark.parametrize("content", ["not json", "[1, 2]", '{"highScore": "abc"}'])
def test_corrupt_file_degrades_to_zero(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, content: str
) -> None:
    path = tmp_path / "best.json"
    path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert BestScoreStore(path).load() == 0

    assert "Could not read best score" in caplog.text


def test_negative_value_is_clamped(tmp_path: Path) -> None:
    path = tmp_path / "best.json"
    path.write_text('{"highScore": -3}', encoding="utf-8")
    assert BestScoreStore(path).load() == 0


def test_failed_write_keeps_value_in_memory(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    # a directory where the file should be
    path = tmp_path / "best.json"
    path.mkdir()
    store = BestScoreStore(path)

    with caplog.at_level(logging.WARNING):
        assert store.save(7) is False

    assert store.value == 7
    assert "Could not write best score" in caplog.text
