import logging
import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone

from database.schema import card_schema
from database.errors import (
    ConstraintError,
    InputOverflowError,
    QueryError,
    SchemaError,
    StorageOpenError,
)
from config import DB_PATH
from utils.srs import clamp_step

# Largest byte length SQLite accepts for a bound text parameter
MAX_PARAM_BYTES = 2**31 - 1

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


# CARDS COMMANDS =============================================

def add_card(conn, front, back):
    _check_size(front, back)
    try:
        cursor = conn.cursor()
        cursor.execute('INSERT INTO cards (front, back) VALUES (?, ?)', (front, back))
    except sqlite3.IntegrityError as e:
        raise ConstraintError(f"Card already exists: {front}") from e
    except (sqlite3.DataError, OverflowError) as e:
        raise InputOverflowError(f"Card text too large: {e}") from e
    except sqlite3.Error as e:
        raise QueryError(f"Can't insert into table: {e}") from e
    logging.info(f"Added card: {front}")


def remove_card(conn, front):
    """Delete a card by front. Missing cards are not an error; returns rows removed."""
    _check_size(front)
    try:
        cursor = conn.cursor()
        cursor.execute('DELETE FROM cards WHERE front = ?', (front,))
    except sqlite3.Error as e:
        raise QueryError(f"Can't delete from table: {e}") from e
    logging.info(f"Removed card: {front} ({cursor.rowcount} row(s))")
    return cursor.rowcount


def get_card(conn, front):
    _check_size(front)
    try:
        cursor = conn.cursor()
        cursor.execute(
            'SELECT front, back, interval, created_at, updated_at FROM cards WHERE front = ?',
            (front,)
        )
        row = cursor.fetchone()
    except sqlite3.Error as e:
        raise QueryError(f"Can't select from table: {e}") from e
    if row:
        return _card_from_row(row)
    return None


def scan_all(conn):
    """All cards in the engine's natural row order. Callers must not rely on the order."""
    try:
        cursor = conn.cursor()
        cursor.execute('SELECT front, back, interval, created_at, updated_at FROM cards')
        rows = cursor.fetchall()
    except sqlite3.Error as e:
        raise QueryError(f"Can't select from table: {e}") from e
    return [_card_from_row(row) for row in rows]


# REVIEW COMMANDS ============================================

def update_step(conn, front, step_index):
    """Store a card's new step index and stamp it as reviewed now. No-op for a missing card."""
    _check_size(front)
    step_index = clamp_step(step_index)
    try:
        cursor = conn.cursor()
        cursor.execute(
            """UPDATE cards
               SET interval = ?,
                   updated_at = MAX(COALESCE(updated_at, CURRENT_TIMESTAMP), CURRENT_TIMESTAMP)
               WHERE front = ?
            """,
            (step_index, front)
        )
    except sqlite3.Error as e:
        raise QueryError(f"Can't update table: {e}") from e

    if cursor.rowcount == 0:
        logging.info(f"Card {front} no longer exists, nothing to update")
    else:
        logging.info(f"Updated card {front}: step={step_index}")


# HELPERS ====================================================

def _card_from_row(row):
    return {
        'front': row['front'],
        'back': row['back'],
        'step_index': row['interval'],
        'created_at': _parse_timestamp(row['created_at']),
        'updated_at': _parse_timestamp(row['updated_at']),
    }


def _parse_timestamp(value):
    """SQLite CURRENT_TIMESTAMP text -> aware UTC datetime."""
    if value is None:
        return None
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def _check_size(*values):
    for value in values:
        try:
            size = len(value.encode('utf-8'))
        except UnicodeEncodeError as e:
            # Undecodable argv bytes arrive as lone surrogates
            raise QueryError(f"Card text is not valid UTF-8: {value!r}") from e
        if size > MAX_PARAM_BYTES:
            raise InputOverflowError(f"Text of {size} bytes exceeds {MAX_PARAM_BYTES}")


# DB CONNECTION ==============================================

@contextmanager
def get_db(path=None):
    """
    Open the card database for the duration of the block.

    Commits on normal exit, rolls back on an exception, and always closes.
    """
    path = path or DB_PATH

    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        conn = sqlite3.connect(path)
    except (OSError, sqlite3.Error) as e:
        raise StorageOpenError(f"Can't open database {path}: {e}") from e

    conn.row_factory = sqlite3.Row

    try:
        yield conn
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        raise QueryError(f"Database error: {e}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(conn):
    try:
        conn.execute(card_schema)
    except sqlite3.Error as e:
        raise SchemaError(f"Can't create table: {e}") from e
