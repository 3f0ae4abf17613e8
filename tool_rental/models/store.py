import copy
import logging
import os
import pickle
import threading
from contextlib import contextmanager
from datetime import datetime, timezone

from tool_rental.exceptions import StoreError

logger = logging.getLogger(__name__)

TABLES = ("tools", "rentals")


class Store:
    """
    Row store for the two tables of the app: ``tools`` and ``rentals``.

    Rows are plain dicts keyed by an auto-increment integer id. With a
    ``path`` the tables are pickled to disk after every committed write;
    without one the store lives in memory only and is lost on exit.
    """

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = str(path) if path else None
        self.tools: dict[int, dict] = {}
        self.rentals: dict[int, dict] = {}
        self._next_ids = {name: 1 for name in TABLES}
        self._rw = threading.RLock()
        self._tx_depth = 0

        if self.path:
            logger.info("Using store file %s", self.path)
            self._load()
        else:
            logger.info("Using in-memory store")

    @property
    def persistent(self) -> bool:
        return self.path is not None

    # ---------- Persistence ----------
    def _load(self):
        """Load tables from the pickle file, or start empty if unavailable or invalid."""
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "rb") as f:
                data = pickle.load(f)
        except Exception as e:
            logger.warning("Load failed (%s); starting empty.", e)
            return

        if isinstance(data, dict) and all(name in data for name in TABLES):
            self.tools = data.get("tools") or {}
            self.rentals = data.get("rentals") or {}
            self._next_ids = data.get("next_ids") or {
                name: max(getattr(self, name), default=0) + 1 for name in TABLES
            }
            logger.info("Loaded: tools=%d, rentals=%d", len(self.tools), len(self.rentals))
        else:
            # Incompatible data format: back up the old file and start empty
            bak = self.path + ".bak"
            try:
                os.replace(self.path, bak)
            except OSError as e:
                raise StoreError(f"Database error: cannot back up {self.path}: {e}") from e
            logger.warning("Incompatible store (%s); backed up to %s. Starting empty.",
                           type(data).__name__, bak)

    def _dump(self):
        """Write the tables to the pickle file safely (atomic replace)."""
        if not self.path:
            return
        tmp = self.path + ".tmp"
        payload = {
            "tools": self.tools,
            "rentals": self.rentals,
            "next_ids": self._next_ids,
        }
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp, "wb") as f:
                pickle.dump(payload, f, protocol=pickle.HIGHEST_PROTOCOL)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            raise StoreError(f"Database error: cannot write {self.path}: {e}") from e

    def save(self):
        """Thread-safe save method."""
        with self._rw:
            logger.debug("Saving to %s", self.path)
            self._dump()

    def close(self):
        """Flush to disk on shutdown; nothing to do for an in-memory store."""
        if self.persistent:
            logger.info("Closing store %s", self.path)
            self.save()

    def clear(self):
        """Drop every row and restart the id counters."""
        with self.transaction():
            self.tools.clear()
            self.rentals.clear()
            self._next_ids = {name: 1 for name in TABLES}

    # ---------- Transactions ----------
    def _snapshot(self):
        return copy.deepcopy((self.tools, self.rentals, self._next_ids))

    def _restore(self, snapshot):
        self.tools, self.rentals, self._next_ids = snapshot

    @contextmanager
    def transaction(self):
        """
        Group writes so they become visible (and hit the disk) together.
        Any exception inside the block restores the tables as they were
        when the outermost block started, then propagates.
        """
        with self._rw:
            snapshot = self._snapshot()
            self._tx_depth += 1
            try:
                yield self
            except Exception:
                self._restore(snapshot)
                raise
            finally:
                self._tx_depth -= 1
            if self._tx_depth == 0:
                try:
                    self._dump()
                except StoreError:
                    self._restore(snapshot)
                    raise

    def _next_id(self, table: str) -> int:
        nid = self._next_ids[table]
        self._next_ids[table] = nid + 1
        return nid

    # ---------- Tools ----------
    def create_tool(self, data: dict) -> int:
        """Insert a tool row and return its ID."""
        with self.transaction():
            tid = self._next_id("tools")
            self.tools[tid] = {
                "tool_id": tid,
                "name": data["name"],
                "description": data.get("description") or "",
                "daily_rate": data["daily_rate"],
                "available": bool(data.get("available", True)),
            }
            return tid

    def get_tool(self, tool_id: int) -> dict | None:
        """Get a tool row by ID."""
        return self.tools.get(tool_id)

    def list_tools(self) -> list[dict]:
        return list(self.tools.values())

    def update_tool(self, tool_id: int, **updates) -> bool:
        """Update tool columns; return True if the row exists."""
        with self.transaction():
            if tool_id not in self.tools:
                return False
            self.tools[tool_id].update(updates)
            return True

    # ---------- Rentals ----------
    def create_rental(self, r: dict) -> int:
        """Insert a rental row; its tool_id must reference an existing tool."""
        with self.transaction():
            if r.get("tool_id") not in self.tools:
                raise StoreError("Database error: FOREIGN KEY constraint failed (rentals.tool_id)")
            rid = self._next_id("rentals")
            r = dict(r)
            r["rental_id"] = rid
            r.setdefault("created_at", datetime.now(timezone.utc).isoformat(timespec="seconds"))
            self.rentals[rid] = r
            return rid

    def get_rental(self, rental_id: int) -> dict | None:
        return self.rentals.get(rental_id)

    def list_rentals(self) -> list[dict]:
        return list(self.rentals.values())
