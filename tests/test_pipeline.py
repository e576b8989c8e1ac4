from __future__ import annotations

import json
from pathlib import Path

from jpvocab.config import DEFAULT_CONFIG
import main


def _cfg(tmp_path) -> dict:
    cfg = json.loads(json.dumps(DEFAULT_CONFIG))
    cfg["paths"]["output_dir"] = str(tmp_path / "output")
    cfg["extraction"]["max_workers"] = 2
    return cfg


def test_run_pipeline_demo(tmp_path) -> None:
    json_path, csv_path = main.run_pipeline(list(main.DEMO_SOURCES), _cfg(tmp_path), "20260101")

    payload = json.loads(Path(json_path).read_text(encoding="utf-8"))
    words = [item["word"] for item in payload["items"]]
    assert words == ["ことば", "言葉", "食べ物", "走る", "テレビ"]


def test_run_pipeline_appends_to_existing_export(tmp_path) -> None:
    cfg = _cfg(tmp_path)
    main.run_pipeline([("言葉 ことば１", "words")], cfg, "20260101")
    json_path, _ = main.run_pipeline([("言葉 ことば２", "words"), ("ことば", "words")], cfg, "20260101")

    payload = json.loads(Path(json_path).read_text(encoding="utf-8"))
    assert payload["count"] == 2
    assert payload["items"][0]["pitch"] == "１"
