"""Persistent board document store.

Every search attempt can be saved as a JSON document under
``local_db/collections/boards/``. Documents hold the full live board, the
best snapshot, the placed words and completion counts, and load back into
an equivalent :class:`Board`.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..core.constants import Bounds, Direction, Location
from ..core.exceptions import BoardStoreError, ConfigurationError
from ..core.models import Cell, PlacedWord
from ..utils.logger import get_logger
from .board import Board, BoardSnapshot, cells_to_jsonable

if TYPE_CHECKING:
    from .search import SearchResult


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/boards")


def board_to_document(board: Board) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        "bounds": _serialize_bounds(board.bounds),
        "word_count": board.word_count,
        "total_words": board.total_words,
        "placed_words": _serialize_placed_words(board.placed_words),
        "cells": board.to_jsonable(),
        "best": None,
    }
    if board.best is not None:
        doc["best"] = {
            "word_count": board.best.word_count,
            "placed_words": _serialize_placed_words(board.best.placed_words),
            "cells": cells_to_jsonable(board.best.rows()),
        }
    return doc


def board_from_document(doc: Dict[str, Any]) -> Board:
    try:
        bounds = _deserialize_bounds(doc["bounds"])
        board = Board(bounds, total_words=int(doc["total_words"]))
        board.cells = _deserialize_cells(doc["cells"], bounds)
        board.placed_words = _deserialize_placed_words(doc["placed_words"])
        board.word_count = int(doc["word_count"])
        best = doc.get("best")
        if best is not None:
            board.best = BoardSnapshot(
                bounds=bounds,
                cells=_deserialize_cells(best["cells"], bounds),
                placed_words=tuple(_deserialize_placed_words(best["placed_words"])),
                word_count=int(best["word_count"]),
            )
    except (KeyError, TypeError, ValueError, AttributeError, ConfigurationError) as exc:
        raise BoardStoreError(f"Malformed board document: {exc!r}") from exc
    return board


class BoardStore:
    """Save boards as structured JSON documents and load them back."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save(self, board: Board, result: Optional["SearchResult"] = None) -> str:
        """Persist ``board`` (and the search outcome if given); return its ID."""
        doc_id = self._new_id()
        doc: Dict[str, Any] = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "status": self._status(board, result),
            "board": board_to_document(board),
        }
        if result is not None:
            doc["search"] = {
                "outcome": result.outcome.value,
                "backtracks": result.stats.backtracks,
                "placements": result.stats.placements,
                "messages": list(result.messages),
            }

        path = self.path_for(doc_id)
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Board saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> Board:
        path = self.path_for(doc_id)
        if not path.exists():
            raise BoardStoreError(f"No stored board with id {doc_id}")
        try:
            doc = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise BoardStoreError(f"Board document {doc_id} is not valid JSON: {exc}") from exc
        if not isinstance(doc, dict) or "board" not in doc:
            raise BoardStoreError(f"Board document {doc_id} has no board section")
        return board_from_document(doc["board"])

    def path_for(self, doc_id: str) -> Path:
        return self.store_dir / f"{doc_id}.json"

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _status(board: Board, result: Optional["SearchResult"]) -> str:
        if result is not None:
            return "success" if result.success else "failed"
        return "success" if board.is_complete() else "partial"

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"


def _serialize_bounds(bounds: Bounds) -> Dict[str, List[int]]:
    return {
        "top_left": [bounds.top_left.x, bounds.top_left.y],
        "bottom_right": [bounds.bottom_right.x, bounds.bottom_right.y],
    }


def _deserialize_bounds(data: Dict[str, List[int]]) -> Bounds:
    left, top = data["top_left"]
    right, bottom = data["bottom_right"]
    return Bounds(Location(int(left), int(top)), Location(int(right), int(bottom)))


def _serialize_placed_words(placed_words) -> List[Dict[str, Any]]:
    return [
        {
            "start": [placed.start.x, placed.start.y],
            "direction": placed.direction.value,
            "text": placed.text,
        }
        for placed in placed_words
    ]


def _deserialize_placed_words(data: List[Dict[str, Any]]) -> List[PlacedWord]:
    return [
        PlacedWord(
            start=Location(int(item["start"][0]), int(item["start"][1])),
            direction=Direction(item["direction"]),
            text=item["text"],
        )
        for item in data
    ]


def _deserialize_cells(rows: List[List[Dict[str, Any]]], bounds: Bounds) -> List[Cell]:
    if len(rows) != bounds.height or any(len(row) != bounds.width for row in rows):
        raise ValueError(f"cell grid does not match bounds {bounds.width}x{bounds.height}")
    return [
        Cell(
            character=item.get("character"),
            locked=bool(item.get("locked", False)),
            usage_count=int(item.get("usage_count", 0)),
            lock_count=int(item.get("lock_count", 0)),
        )
        for row in rows
        for item in row
    ]
