"""Dated SQL history log files."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from pathlib import Path

from sqlgrid.render.cells import unify_str

LOG_LOOKBACK_DAYS = 100
LOG_HEADER = "-- -*- mode: sql; -*-\n-- Local Variables:\n-- eval: (sql-mode)\n-- End:\n"
ENTRY_RULE = "-" * 50


def log_file_name(day: date) -> str:
    return f"{day:%Y-%m-%d}.log"


def get_log_file(log_dir: Path, *, create_new: bool = False, today: date | None = None) -> Path | None:
    """Return the log file to use.

    With ``create_new`` this is always today's file, existing or not.
    Otherwise the newest existing log from the last 100 days is returned, or
    ``None`` when there is none.
    """
    today = today or date.today()
    for days_back in range(LOG_LOOKBACK_DAYS):
        candidate = log_dir / log_file_name(today - timedelta(days=days_back))
        if create_new or candidate.exists():
            return candidate
    return None


def log_file_path(log_dir: Path, *, today: date | None = None) -> Path:
    """Path shown to users: the latest log file, or the log directory itself."""
    return get_log_file(log_dir, today=today) or log_dir


def format_log_entry(sql: str, now: datetime) -> str:
    millis = now.microsecond // 1000
    timestamp = f"{now:%Y.%m.%d %H:%M:%S}.{millis}"
    return unify_str(f"{ENTRY_RULE} {timestamp} --\n", sql, "\n", line_break="\n")


def log_sql(sql: str, log_dir: Path, *, now: datetime | None = None) -> Path:
    """Append ``sql`` to today's log, creating the directory and file as needed."""
    now = now or datetime.now()
    log_file = log_dir / log_file_name(now.date())
    is_new_file = not log_file.exists()
    if is_new_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    with log_file.open("a", encoding="utf-8") as handle:
        if is_new_file:
            handle.write(LOG_HEADER)
        handle.write(format_log_entry(sql, now))
    return log_file
