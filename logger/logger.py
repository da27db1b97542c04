import json
import os
from datetime import datetime, timezone

def _utc_date(now):
    return now.strftime("%Y-%m-%d")

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="dtm_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = _utc_date(datetime.now(timezone.utc))
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def log(self, entry: dict):
        """Log a single entry to the run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def rotate(self, today=None):
        """Switch to the log file of the given (default: current) UTC date."""
        self.today = today or _utc_date(datetime.now(timezone.utc))
        self.current_log = self._get_log_filename()

    def log_run(self, mode: str, word: str, result, program=None):
        """Record one transform/decide query and its result."""
        now = datetime.now(timezone.utc)
        if _utc_date(now) != self.today:
            self.rotate(_utc_date(now))
        self.log({
            "timestamp": now.isoformat(),
            "mode": mode,
            "word": word,
            "result": result,
            "program": str(program) if program is not None else None
        })
