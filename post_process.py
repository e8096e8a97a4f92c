# post_process.py
import os
import re
import sys

import duckdb

from constants import SLOT_POSITIONS

SOURCE_SOLUTIONS_DIR = 'solutions'

CENTER_ROW, CENTER_COL = SLOT_POSITIONS[0]
CENTER_PIECE_COLUMN = f"piece_{CENTER_ROW}{CENTER_COL}"


def find_latest_solution_file(directory, base_name="solutions", extension="parquet"):
    """
    Finds the solution file with the highest index in a directory.
    Returns (path, None) on success and (None, error_message) otherwise.
    """
    if not os.path.isdir(directory):
        return None, f"Solutions directory '{directory}' not found."

    pattern = re.compile(rf"{re.escape(base_name)}_(\d+)\.{re.escape(extension)}$")
    highest_index = -1
    latest_file_path = None
    for filename in os.listdir(directory):
        match = pattern.match(filename)
        if match:
            index = int(match.group(1))
            if index > highest_index:
                highest_index = index
                latest_file_path = os.path.join(directory, filename)

    if latest_file_path:
        return latest_file_path, None
    return None, f"No solution file (e.g. '{base_name}_1.{extension}') found in '{directory}'."


def _parquet_source(parquet_file_path):
    escaped = str(parquet_file_path).replace("'", "''")
    return f"read_parquet('{escaped}')"


def load_solutions(parquet_file_path):
    """Reads an exported solutions file into a DataFrame, numbering the rows."""
    con = duckdb.connect()
    try:
        return con.execute(
            f"SELECT ROW_NUMBER() OVER () AS solution_id, * FROM {_parquet_source(parquet_file_path)}"
        ).fetchdf()
    finally:
        con.close()


def summarize_by_center(parquet_file_path):
    """Number of solutions found for each center piece."""
    con = duckdb.connect()
    try:
        return con.execute(f"""
            SELECT CAST("{CENTER_PIECE_COLUMN}" AS INTEGER) AS center_piece, COUNT(*) AS solutions
            FROM {_parquet_source(parquet_file_path)}
            GROUP BY center_piece
            ORDER BY center_piece;
        """).fetchdf()
    finally:
        con.close()


def main(directory=SOURCE_SOLUTIONS_DIR):
    parquet_file, error = find_latest_solution_file(directory)
    if error:
        print(f"❌ ERROR: {error}")
        return 1
    print(f"✅ Solutions file found: '{parquet_file}'")

    solutions = load_solutions(parquet_file)
    print(f"  -> {len(solutions)} solution(s) stored.")

    summary = summarize_by_center(parquet_file)
    for row in summary.itertuples(index=False):
        print(f"  -> center piece {row.center_piece}: {row.solutions} solution(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
