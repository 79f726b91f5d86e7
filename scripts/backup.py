"""Backup or restore the whole key-value state as one JSON file.

Usage:
    python scripts/backup.py                 # writes backups/state_<timestamp>.json
    python scripts/backup.py --restore FILE  # overwrites every key found in FILE
"""

from __future__ import annotations

import argparse
import importlib
import json
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module
from gate_attendance.container import build_storage


def main() -> None:
    parser = argparse.ArgumentParser(description="Backup/restore gate attendance state")
    parser.add_argument("--restore", metavar="FILE", help="restore keys from a backup file")
    parser.add_argument("--out-dir", default=str(Path(__file__).resolve().parents[1] / "backups"))
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        backend=settings.STORAGE_BACKEND,
        data_dir=settings.DATA_DIR,
        db_config=settings.DB_CONFIG,
    )

    if args.restore:
        data = json.loads(Path(args.restore).read_text(encoding="utf-8"))
        for key, value in data.items():
            storage.set(key, value)
        print(f"OK: Restored {len(data)} keys from {args.restore}")
        return

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"state_{ts}.json"

    data = {key: storage.get(key) for key in storage.keys()}
    out_file.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(data)} keys)")


if __name__ == "__main__":
    main()
