"""
Repository for the engine list stored in data/engines.json.

The file holds a JSON list of EngineConfiguration.to_variant() dicts.
Reading is permissive: a missing or corrupt file gives an empty list and
entries that are not objects are skipped.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from domain.models import EngineConfiguration

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
ENGINES_FILE = "engines.json"

_log = logging.getLogger(__name__)


class EngineRepository:
    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = data_dir or DATA_DIR
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def engines_file(self) -> Path:
        return self.data_dir / ENGINES_FILE

    def _read_records(self) -> List[Any]:
        """Every stored record as-is, including ones this version does not understand."""
        fp = self.engines_file
        if not fp.exists():
            return []
        try:
            with fp.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            _log.warning("Ignoring unreadable engine list %s: %s", fp, e)
            return []
        if not isinstance(raw, list):
            _log.warning("Ignoring engine list %s: expected a JSON list", fp)
            return []
        return raw

    def _write_records(self, records: List[Any]) -> None:
        with self.engines_file.open("w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)

    def load_engines(self, diagnostics: Optional[List[str]] = None) -> List[EngineConfiguration]:
        return [
            EngineConfiguration.from_variant(item, diagnostics)
            for item in self._read_records()
            if isinstance(item, dict)
        ]

    def save_engines(self, engines: List[EngineConfiguration]) -> None:
        self._write_records([e.to_variant() for e in engines])

    def find_engine(self, name: str) -> Optional[EngineConfiguration]:
        for engine in self.load_engines():
            if engine.name == name:
                return engine
        return None

    # Upsert and remove rewrite only the matching record; the others are kept
    # verbatim so fields and options written by other versions survive.

    def upsert_engine(self, engine: EngineConfiguration) -> None:
        """Replace the stored engine with the same name, or append it."""
        records = self._read_records()
        for i, item in enumerate(records):
            if _record_name(item) == engine.name:
                records[i] = engine.to_variant()
                break
        else:
            records.append(engine.to_variant())
        self._write_records(records)

    def remove_engine(self, name: str) -> bool:
        records = self._read_records()
        kept = [item for item in records if _record_name(item) != name]
        if len(kept) == len(records):
            return False
        self._write_records(kept)
        return True


def _record_name(item: Any) -> Optional[str]:
    return item.get("name") if isinstance(item, dict) else None
