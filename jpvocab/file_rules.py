"""Filename rules for 1:1 matching between JSON and CSV exports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

STEM_RE = re.compile(r"^(?P<date>\d{8})_(?P<tag>[a-z0-9_-]+)$")


@dataclass(frozen=True)
class ExportFiles:
    stem: str
    json_path: Path
    csv_path: Path


def build_stem(date_yyyymmdd: str, dictionary_type: str = "sanseido") -> str:
    tag = re.sub(r"[^a-z0-9_-]+", "-", dictionary_type.lower()).strip("-") or "unknown"
    return f"{date_yyyymmdd}_{tag}"


def build_export_bundle(base_dir: str | Path, date_yyyymmdd: str, dictionary_type: str = "sanseido") -> ExportFiles:
    stem = build_stem(date_yyyymmdd=date_yyyymmdd, dictionary_type=dictionary_type)
    base = Path(base_dir)
    return ExportFiles(
        stem=stem,
        json_path=base / f"vocabulary_{stem}.json",
        csv_path=base / f"vocabulary_{stem}.csv",
    )


def validate_stem(stem: str) -> bool:
    return STEM_RE.match(stem) is not None


def validate_bundle(paths: ExportFiles) -> bool:
    stem = paths.stem
    if not validate_stem(stem):
        return False
    return paths.json_path.name == f"vocabulary_{stem}.json" and paths.csv_path.name == f"vocabulary_{stem}.csv"
