import logging
import sys

import database.database as db
import handlers.cards as hand_card
import handlers.review as hand_review
from database.errors import StorageError
from utils.constants import USAGE, ExitCode

# Number of positional arguments each command takes
COMMAND_ARGS = {
    'add': 2,
    'list': 0,
    'remove': 1,
}


class UsageError(Exception):
    """Raised when argv does not match any command."""
    pass


def parse_args(argv: list[str]) -> tuple[str | None, list[str]]:
    """
    Split argv into a command and its arguments.

    Arguments are taken verbatim, so card text may start with '-'.
    An empty argv means a review round and returns (None, []).
    """
    if not argv:
        return None, []
    command, args = argv[0], argv[1:]
    if command not in COMMAND_ARGS:
        raise UsageError(f"Unknown command: {command}")
    if len(args) != COMMAND_ARGS[command]:
        raise UsageError(f"{command} takes {COMMAND_ARGS[command]} argument(s), got {len(args)}")
    return command, args


def run(command: str | None, args: list[str], conn) -> None:
    """Dispatch one command against an open database."""
    if command == 'add':
        hand_card.add_command(conn, *args)
    elif command == 'list':
        hand_card.list_command(conn)
    elif command == 'remove':
        hand_card.remove_command(conn, *args)
    else:
        hand_review.review_round(conn)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        command, args = parse_args(argv)
    except UsageError as e:
        logging.info(f"Bad invocation: {e}")
        print(USAGE, file=sys.stderr)
        return ExitCode.USAGE

    try:
        with db.get_db() as conn:
            db.init_db(conn)
            run(command, args, conn)
    except (StorageError, ValueError) as e:
        # ValueError: a stored step index outside the ladder
        logging.info(f"{command or 'review'} failed", exc_info=e)
        print(e, file=sys.stderr)
        return ExitCode.ERROR
    except KeyboardInterrupt:
        # Nothing was committed; the card keeps its previous step
        print(file=sys.stderr)
        return ExitCode.INTERRUPTED

    return ExitCode.OK


if __name__ == '__main__':
    sys.exit(main())
