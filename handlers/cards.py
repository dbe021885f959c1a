import sys
from datetime import datetime
from typing import TextIO

import database.database as db
from utils.srs import due_cards
from utils.utils import write


def add_command(conn, front: str, back: str) -> None:
    """`add <front> <back>`: raises ConstraintError if the front is taken."""
    db.add_card(conn, front, back)


def list_command(conn, stdout: TextIO | None = None, now: datetime | None = None) -> list[str]:
    """`list`: print the front of every due card, one per line, in scan order."""
    stdout = stdout or sys.stdout

    fronts = [card['front'] for card in due_cards(db.scan_all(conn), now)]
    for front in fronts:
        write(stdout, front, end='\n')
    return fronts


def remove_command(conn, front: str) -> None:
    """`remove <front>`: succeeds whether or not the card exists."""
    db.remove_card(conn, front)
