"""
Output path helpers for analysis results and charts.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


def ensure_dir(path: str) -> str:
    Path(path).mkdir(parents=True, exist_ok=True)
    return path


def _resolve(path: str) -> str:
    candidate = Path(path)
    if not candidate.is_absolute():
        project_root = os.environ.get("PROJECT_ROOT")
        if project_root:
            candidate = Path(project_root) / candidate
    return str(candidate)


def get_report_dir(path: Optional[str] = None) -> str:
    """Report directory: explicit path, else ``$REPORT_DIR``, else ./report."""
    if path:
        target = _resolve(path)
    else:
        target = os.environ.get("REPORT_DIR") or str(Path(os.getcwd()).resolve() / "report")
    return ensure_dir(target)


def get_images_dir(path: Optional[str] = None) -> str:
    return ensure_dir(os.path.join(get_report_dir(path), "images"))
