import logging
import sys
from datetime import datetime
from typing import Any, TextIO

import database.database as db
from utils.constants import JUDGE_PROMPT, ReviewState
from utils.srs import due_cards, is_pass, next_step
from utils.utils import read_line, write


def review_round(
    conn,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    now: datetime | None = None,
) -> dict[str, Any] | None:
    """
    Review the first due card: show the front, wait, show the back, ask for
    a judgment and store the new step.

    Returns {'front', 'passed', 'step_index'} for the reviewed card, or None
    if nothing was due (in which case nothing is printed).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    state = ReviewState.SELECTING
    card: dict[str, Any] | None = None
    result: dict[str, Any] | None = None

    while state != ReviewState.DONE:
        if state == ReviewState.SELECTING:
            card = _select_card(conn, now)
            state = ReviewState.PRESENTING if card else ReviewState.DONE

        elif state == ReviewState.PRESENTING:
            _show_front(card, stdin, stdout)
            state = ReviewState.JUDGING

        elif state == ReviewState.JUDGING:
            passed = _judge(card, stdin, stdout)
            result = _record(conn, card, passed)
            state = ReviewState.DONE

    return result


# ============================================================
# Private helpers
# ============================================================

def _select_card(conn, now: datetime | None) -> dict[str, Any] | None:
    """First due card in scan order, if any."""
    due = due_cards(db.scan_all(conn), now)
    if not due:
        logging.info("Nothing due")
        return None
    return due[0]


def _show_front(card: dict[str, Any], stdin: TextIO, stdout: TextIO) -> None:
    # Any reply (even end of input) reveals the answer
    write(stdout, card['front'])
    read_line(stdin)


def _judge(card: dict[str, Any], stdin: TextIO, stdout: TextIO) -> bool:
    write(stdout, card['back'], end='\n')
    write(stdout, JUDGE_PROMPT)
    return is_pass(read_line(stdin))


def _record(conn, card: dict[str, Any], passed: bool) -> dict[str, Any]:
    step = next_step(card['step_index'], passed)
    db.update_step(conn, card['front'], step)

    logging.info(
        f"Card {card['front']}: {'passed' if passed else 'failed'}, "
        f"step {card['step_index']} -> {step}"
    )
    return {'front': card['front'], 'passed': passed, 'step_index': step}
