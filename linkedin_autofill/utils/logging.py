"""Logging utilities"""

import json
import os
from datetime import datetime
from zoneinfo import ZoneInfo

import linkedin_autofill.config as config


def now_iso():
    return datetime.now(ZoneInfo(config.TIMEZONE)).isoformat()


def append_jsonl(path, record):
    """Append one JSON object as a line. Creates parent directories as needed."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")


def read_jsonl(path):
    """Read all records from a JSONL file. Missing file reads as empty."""
    if not os.path.exists(path):
        return []

    records = []
    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError:
                print(f"  ⚠️ Skipping malformed line {line_number} in {path}")
    return records


def log_result(job_url, status, reason="", steps_completed=0, path=None):
    """Log application result to JSONL file"""
    result = {
        "timestamp": now_iso(),
        "job_url": job_url,
        "status": status,
        "steps_completed": steps_completed,
    }
    if reason:
        result["failure_reason"] = reason

    append_jsonl(path or config.RESULT_LOG_PATH, result)

    print(f"[{status}] {job_url}")
    if reason:
        print(f"  Reason: {reason}")
