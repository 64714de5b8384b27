import json
import os
from datetime import datetime, timezone


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.rotate()

    def _get_log_filename(self):
        return f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        self.log_batch([entry])

    def log_batch(self, entries: list):
        """Append entries to the main log; a batch written after midnight (UTC) starts the next day's file."""
        self.rotate()
        self._log_to_file(self.current_log, entries)

    def rotate(self):
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_run(self, machine, result):
        """Log a run summary, and also file it under accepted or rejected runs."""
        entry = {"machine": str(machine), "timestamp": datetime.now(timezone.utc).isoformat()}
        entry.update(result.to_dict())
        self.log(entry)
        if result.ok:
            self.log_accepted([entry])
        else:
            self.log_rejected([entry])

    def log_accepted(self, entries: list):
        filename = f"accepted_{self.today}.jsonl"
        self._log_to_file(filename, entries)

    def log_rejected(self, entries: list):
        """Runs that were not accepted, including illegal inputs and step-limit stops."""
        filename = f"rejected_{self.today}.jsonl"
        self._log_to_file(filename, entries)

    def log_trace(self, machine, input_string, snapshots: list):
        """Log the step-by-step trace of one run, one line per step."""
        filename = f"trace_{self.today}.jsonl"
        entries = [dict(snapshot, machine=str(machine), input=input_string) for snapshot in snapshots]
        self._log_to_file(filename, entries)


class TraceRecorder:
    """Simulator observer that keeps every step snapshot as a plain dict."""

    def __init__(self):
        self.snapshots = []

    def __call__(self, snapshot):
        self.snapshots.append(snapshot.to_dict())
