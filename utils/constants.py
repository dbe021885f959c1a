from enum import auto, IntEnum

from config import PROGRAM

USAGE = f"Usage: {PROGRAM} [add <front> <back> | list | remove <front>]"

JUDGE_PROMPT = "Ok? (Y/n) "


class ReviewState(IntEnum):
    SELECTING = auto()
    PRESENTING = auto()
    JUDGING = auto()
    DONE = auto()


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1
    USAGE = 2
    INTERRUPTED = 130
