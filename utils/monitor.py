"""
Execution monitor: per-node status entries kept in shared["monitor"].
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def init_monitor(shared: Dict[str, Any]) -> Dict[str, Any]:
    monitor = shared.get("monitor")
    if not isinstance(monitor, dict):
        monitor = {}
        shared["monitor"] = monitor

    monitor.setdefault("start_time", _now())
    monitor.setdefault("current_node", "")
    monitor.setdefault("execution_log", [])
    monitor.setdefault("error_log", [])
    return monitor


def update_status(
    shared: Dict[str, Any],
    *,
    node_name: str,
    status: str,
    elapsed: Optional[float] = None,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """Append a status entry for ``node_name``; failures also go to error_log."""
    monitor = init_monitor(shared)
    monitor["current_node"] = node_name

    entry = {
        "time": _now(),
        "node": node_name,
        "status": status,
        "elapsed": round(elapsed, 4) if elapsed is not None else None,
        "error": error or "",
    }
    monitor["execution_log"].append(entry)
    if status == "failed":
        monitor["error_log"].append(entry)
    return entry
