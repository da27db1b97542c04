import json
from pathlib import Path

from logger.logger import JSONLogger


def read_entries(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_log_file_named_by_prefix_and_date(tmp_path):
    logger = JSONLogger(str(tmp_path / "logs"), "dtm_")
    name = Path(logger.current_log).name
    assert name == f"dtm_{logger.today}.jsonl"
    assert (tmp_path / "logs").is_dir()


def test_log_appends_lines(tmp_path):
    logger = JSONLogger(str(tmp_path), "t_")
    for n in (1, 2, 3):
        logger.log({"n": n})
    assert [e["n"] for e in read_entries(logger.current_log)] == [1, 2, 3]


def test_log_run_entry_fields(tmp_path):
    logger = JSONLogger(str(tmp_path), "t_")
    logger.log_run("transform", "ab", "ba", "programs/reverse.tm")
    logger.log_run("decide", "", True)

    first, second = read_entries(logger.current_log)
    assert first["mode"] == "transform"
    assert first["word"] == "ab"
    assert first["result"] == "ba"
    assert first["program"] == "programs/reverse.tm"
    assert "timestamp" in first
    assert second["result"] is True
    assert second["program"] is None


def test_log_run_switches_file_after_utc_midnight(tmp_path):
    logger = JSONLogger(str(tmp_path), "t_")
    today = logger.today
    # Pretend the session was started on an earlier day.
    logger.rotate("1999-12-31")
    stale_log = logger.current_log

    logger.log_run("decide", "a", False)

    assert logger.today == today
    assert Path(logger.current_log).name == f"t_{today}.jsonl"
    assert not Path(stale_log).exists()
    assert [e["word"] for e in read_entries(logger.current_log)] == ["a"]


def test_rotate_defaults_to_current_date(tmp_path):
    logger = JSONLogger(str(tmp_path), "t_")
    today = logger.today
    logger.rotate("2000-01-01")
    assert Path(logger.current_log).name == "t_2000-01-01.jsonl"
    logger.rotate()
    assert logger.today == today
