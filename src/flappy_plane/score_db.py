"""
score_db.py: Durable key-value storage for best scores and the player name.
"""

import logging
import sqlite3
from typing import Optional

from .constants import DB_FILE, BEST_SCORE_KEY, PLAYER_NAME_KEY, DEFAULT_PLAYER_NAME

log = logging.getLogger(__name__)


def player_score_key(name: str) -> str:
    """Storage key of a single player's best score."""
    return f"{BEST_SCORE_KEY}:{name}"


class ScoreStore:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS KeyValue (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        self.conn.commit()

    def close(self):
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ---------- Raw key/value ----------

    def get(self, key: str) -> Optional[str]:
        self.cur.execute("SELECT value FROM KeyValue WHERE key=?", (key,))
        row = self.cur.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str):
        self.cur.execute(
            "INSERT OR REPLACE INTO KeyValue (key, value) VALUES (?, ?)", (key, value))
        self.conn.commit()

    def get_int(self, key: str) -> int:
        """Reads a non-negative integer, 0 when absent or unreadable."""
        raw = self.get(key)
        if raw is None:
            return 0
        try:
            value = int(raw)
        except ValueError:
            log.warning("Ignoring unreadable value %r stored under %r", raw, key)
            return 0
        if value < 0:
            log.warning("Ignoring negative value %d stored under %r", value, key)
            return 0
        return value

    def set_int(self, key: str, value: int):
        if value < 0:
            raise ValueError(f"Refusing to store negative value {value} under {key!r}")
        self.set(key, str(int(value)))

    # ---------- Scores ----------

    def get_best(self, player: Optional[str] = None) -> int:
        """Global best score, or the named player's best score."""
        key = player_score_key(player) if player is not None else BEST_SCORE_KEY
        return self.get_int(key)

    def save_best(self, score: int, player: Optional[str] = None):
        key = player_score_key(player) if player is not None else BEST_SCORE_KEY
        self.set_int(key, score)
        log.debug("Saved best score %d under %r", score, key)

    # ---------- Player identity ----------

    def get_player_name(self, default: str = DEFAULT_PLAYER_NAME) -> str:
        name = self.get(PLAYER_NAME_KEY)
        return name if name else default

    def set_player_name(self, name: str):
        self.set(PLAYER_NAME_KEY, name)
