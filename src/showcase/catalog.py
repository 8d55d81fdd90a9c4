"""Load and validate the YAML demo catalog. Used by the runner."""

import importlib
import os
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import yaml

_ENTRY_RE = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_]\w*$")


@dataclass(frozen=True)
class DemoEntry:
    id: str
    title: str
    entry: str

    def resolve(self) -> Callable:
        """Import and return the demo function named by entry."""
        module_name, func_name = self.entry.split(":", 1)
        module = importlib.import_module(module_name)
        try:
            return getattr(module, func_name)
        except AttributeError:
            raise ValueError(
                f"Demo '{self.id}' entry '{self.entry}' does not exist"
            ) from None


def get_catalog_path() -> Path:
    """Return path to the catalog YAML (SHOWCASE_CATALOG_PATH env or the packaged catalog.yaml)."""
    default = Path(__file__).resolve().parent / "catalog.yaml"
    path = os.environ.get("SHOWCASE_CATALOG_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_catalog(path: Path | None = None) -> list[DemoEntry]:
    """Load the catalog YAML and return its demos in order. Validates structure."""
    if path is None:
        path = get_catalog_path()
    raw = path.read_text(encoding="utf-8")
    catalog = yaml.safe_load(raw)
    if not isinstance(catalog, dict):
        raise ValueError("Catalog YAML must be a dict")
    demos = catalog.get("demos")
    if not demos or not isinstance(demos, list):
        raise ValueError("Catalog must have a non-empty 'demos' list")
    entries: list[DemoEntry] = []
    seen: set[str] = set()
    for item in demos:
        if not isinstance(item, dict):
            raise ValueError("Every demo must be a mapping")
        demo_id = str(item.get("id") or "").strip()
        if not demo_id:
            raise ValueError("Every demo must have 'id'")
        if demo_id in seen:
            raise ValueError(f"Duplicate demo id '{demo_id}'")
        entry = str(item.get("entry") or "").strip()
        if not _ENTRY_RE.match(entry):
            raise ValueError(
                f"Demo '{demo_id}' entry must look like 'package.module:function'"
            )
        seen.add(demo_id)
        entries.append(
            DemoEntry(
                id=demo_id,
                title=str(item.get("title") or demo_id).strip(),
                entry=entry,
            )
        )
    return entries


def select(entries: list[DemoEntry], ids: list[str]) -> list[DemoEntry]:
    """Return entries whose id is in ids, in catalog order. Unknown ids raise KeyError."""
    known = {e.id for e in entries}
    unknown = [i for i in ids if i not in known]
    if unknown:
        raise KeyError(", ".join(unknown))
    wanted = set(ids)
    return [e for e in entries if e.id in wanted]
