from __future__ import annotations

import argparse
from datetime import datetime
import logging
from pathlib import Path
import sys
from typing import Any

from jpvocab.batch import collect_records, extract_entries, read_source_file
from jpvocab.config import cfg_get, load_config
from jpvocab.file_rules import build_export_bundle
from jpvocab.store import RecordStore


LOGGER = logging.getLogger("pipeline")

DEMO_SOURCES: list[tuple[str, str]] = [
    ("△言葉［ことば］３", "Words; language; speech."),
    ("言葉３", "Words; language; speech."),
    ("ことば１", "Words; language; speech."),
    ("▲食べ物たべもの２", "Food."),
    ("走る はしる２", "To run."),
    ("テレビ２", "Television."),
]


def _today() -> str:
    return datetime.now().strftime("%Y%m%d")


def run_pipeline(pairs: list[tuple[str, str]], cfg: dict[str, Any], date_str: str) -> tuple[str, str]:
    """Extract, deduplicate and save one batch of scraped entries.

    Returns:
        tuple[str, str]: Saved JSON and CSV paths.
    """

    dictionary_type = str(cfg_get(cfg, "extraction.dictionary_type", "sanseido"))
    max_workers = int(cfg_get(cfg, "extraction.max_workers", 1))
    output_dir = Path(cfg_get(cfg, "paths.output_dir", "output"))

    LOGGER.info("[STEP] extract start count=%d workers=%d", len(pairs), max_workers)
    entries = extract_entries(pairs, max_workers=max_workers)
    LOGGER.info("[STEP] extract success count=%d", len(entries))

    paths = build_export_bundle(output_dir, date_str, dictionary_type)
    store = RecordStore.load(paths.json_path) if paths.json_path.exists() else RecordStore()
    added, skipped = collect_records(entries, dictionary_type, store)
    LOGGER.info("[STEP] collect success added=%d skipped=%d total=%d", added, skipped, len(store))

    return store.save(paths)


def _setup_logging(date_str: str, cfg: dict[str, Any]) -> None:
    logs_dir = Path(cfg_get(cfg, "paths.logs_dir", "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"pipeline_{date_str}.log"

    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    logging.basicConfig(
        level=logging.INFO,
        format=fmt,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_path, encoding="utf-8"),
        ],
        force=True,
    )


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Japanese vocabulary extraction pipeline")
    p.add_argument("--input", default="", help="Tab-separated source file (raw<TAB>definition)")
    p.add_argument("--dictionary-type", default="", help="Dictionary type tag for stored records")
    p.add_argument("--date", default="", help="Export date (YYYYMMDD)")
    p.add_argument("--workers", type=int, default=0, help="Extraction worker threads")
    p.add_argument("--demo", action="store_true", help="Run on a built-in sample instead of --input")
    p.add_argument("--config", default="config.yaml", help="Config file path")
    return p.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    date_str = args.date or _today()

    # Load config first with lightweight fallback logging.
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    cfg = load_config(args.config)
    if args.dictionary_type:
        cfg["extraction"]["dictionary_type"] = args.dictionary_type
    if args.workers > 0:
        cfg["extraction"]["max_workers"] = args.workers

    _setup_logging(date_str, cfg)
    LOGGER.info("Pipeline start date=%s input=%s demo=%s", date_str, args.input, args.demo)

    try:
        if args.demo:
            pairs = list(DEMO_SOURCES)
        elif args.input:
            pairs = read_source_file(args.input)
        else:
            LOGGER.error("Either --input or --demo is required")
            sys.exit(2)
        json_path, csv_path = run_pipeline(pairs, cfg, date_str)
        LOGGER.info("Pipeline success json=%s csv=%s", json_path, csv_path)
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Pipeline failed: %s", exc)
        sys.exit(1)
