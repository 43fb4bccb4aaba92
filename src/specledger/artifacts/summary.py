from __future__ import annotations

import json
from pathlib import Path

from specledger.results.models import RunSummary


def write_summary(out_dir: Path, summary: RunSummary) -> Path:
    summary_path = out_dir / "summary.json"
    out_dir.mkdir(parents=True, exist_ok=True)

    summary_path.write_text(
        json.dumps(summary.to_host_dict(), indent=2, ensure_ascii=False, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return summary_path
