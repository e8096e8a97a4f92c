# visualize.py
"""
Terminal rendering of solutions and search statistics.

The board is drawn the way it lies on the table, so the slot order of a
solution (center first, then clockwise) is rearranged row by row.
"""

from constants import DISPLAY_ROWS

SEPARATOR = "-" * 26


def format_turns(rotation):
    return "  0 " if rotation == 0 else f"{rotation}/4 "


def format_solution(solution, number):
    lines = [
        f"Solution #{number}",
        SEPARATOR,
        " indexes |     turns      ",
        "---------+----------------",
    ]
    for row in DISPLAY_ROWS:
        indexes = " ".join(str(solution[slot][0]) for slot in row)
        turns = "".join(f" {format_turns(solution[slot][1])}" for slot in row)
        lines.append(f"  {indexes}  | {turns}")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def format_statistics(total_tries, tries_at_level, elapsed_us):
    levels = " ".join(str(tries) for tries in tries_at_level)
    return (
        f"Total tries: {total_tries}\n"
        f"At level:    {levels}\n"
        f"\n"
        f"Total calculation time: {elapsed_us} µs"
    )
