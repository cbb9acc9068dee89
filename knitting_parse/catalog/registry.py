"""
Stitch catalog: loads the stitch width table from YAML at startup, validates
that it covers every Stitch member, and exposes a read-only query API.

The catalog is a module-level singleton; call get_catalog() to obtain it.
The table is loaded and validated once at import time, so a Stitch member
without a width fails the import rather than a later lookup. Nothing writes
to the catalog after startup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType

import yaml

from .types import ALLOWED_WIDTHS, Stitch, StitchEntry

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_TABLE_FILE = "stitches.yaml"


class StitchCatalog:
    """
    Immutable catalog of stitch display widths.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_catalog() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        entries, errors = self._load_entries()
        self._validate(entries, errors)

        self.entries: MappingProxyType[Stitch, StitchEntry] = MappingProxyType(entries)
        logger.debug("Loaded %d stitch widths from %s", len(entries), data_dir)

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict:
        path = self._data_dir / filename
        with open(path) as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Failed to parse {path}: {exc}") from exc

    def _load_entries(self) -> tuple[dict[Stitch, StitchEntry], list[str]]:
        data = self._load_yaml(_TABLE_FILE)
        if not isinstance(data, dict) or not isinstance(data.get("stitches"), list):
            raise ValueError(f"{_TABLE_FILE} must contain a 'stitches' list")

        entries: dict[Stitch, StitchEntry] = {}
        errors: list[str] = []
        for index, raw in enumerate(data["stitches"]):
            if not isinstance(raw, dict) or "id" not in raw or "width" not in raw:
                errors.append(
                    f"malformed entry at index {index}: "
                    f"expected a mapping with 'id' and 'width', got {raw!r}"
                )
                continue
            try:
                stitch = Stitch(raw["id"])
            except ValueError:
                errors.append(f"unknown stitch id: {raw['id']!r}")
                continue
            if stitch in entries:
                errors.append(f"duplicate entry for stitch {stitch.value!r}")
                continue
            entries[stitch] = StitchEntry(
                id=stitch,
                width=raw["width"],
                description=str(raw.get("description", "")).strip(),
            )
        return entries, errors

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self, entries: dict[Stitch, StitchEntry], errors: list[str]) -> None:
        """
        Raises ValueError listing all problems found if the table misses a
        Stitch member or declares a width outside ALLOWED_WIDTHS.
        """
        for stitch in Stitch:
            if stitch not in entries:
                errors.append(f"stitch {stitch.value!r} has no width entry")

        for stitch, entry in entries.items():
            if (
                isinstance(entry.width, bool)
                or not isinstance(entry.width, int)
                or entry.width not in ALLOWED_WIDTHS
            ):
                errors.append(
                    f"stitch {stitch.value!r} has invalid width {entry.width!r}; "
                    f"expected one of {sorted(ALLOWED_WIDTHS)}"
                )

        if errors:
            raise ValueError(
                "Stitch catalog validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def width(self, stitch: Stitch) -> int:
        """Return how many grid columns the stitch occupies."""
        return self.entries[stitch].width

    def line_width(self, stitches: Iterable[Stitch]) -> int:
        """Return the total width of a sequence of stitches."""
        return sum(self.entries[s].width for s in stitches)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time. The catalog is read-only after
# construction, so sharing it across threads is safe.

_catalog: StitchCatalog = StitchCatalog()


def get_catalog() -> StitchCatalog:
    """Return the module-level catalog singleton."""
    return _catalog


def width(stitch: Stitch) -> int:
    """Width of a single stitch, from the module catalog."""
    return _catalog.width(stitch)


def line_width(stitches: Iterable[Stitch]) -> int:
    """Total width of a line of stitches, from the module catalog."""
    return _catalog.line_width(stitches)
