# utils.py
import logging
import os
import re

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from analysis import STAT_KEYS, calculate_solution_stats
from constants import EDGE_VALUE_MAX, EDGE_VALUE_MIN, GRID_SIZE, NUM_EDGES, NUM_SLOTS, SLOT_POSITIONS

logger = logging.getLogger(__name__)


class PuzzleFormatError(ValueError):
    """Raised when a pieces file does not describe nine 4-edge pieces."""


def load_pieces(file_path, allow_zero_edges=True):
    """
    Reads a pieces file: one piece per line, four integer edge values
    separated by whitespace. Blank lines are skipped.
    """
    pieces = []
    with open(file_path, 'r', encoding='utf-8') as file:
        for line_number, line in enumerate(file, start=1):
            tokens = line.split()
            if not tokens:
                continue
            if len(tokens) != NUM_EDGES:
                raise PuzzleFormatError(f"each piece must have {NUM_EDGES} edges (line {line_number}).")

            try:
                piece = tuple(int(token) for token in tokens)
            except ValueError:
                raise PuzzleFormatError(
                    f"invalid edge value on line {line_number}: {line.strip()!r}"
                ) from None

            if any(not EDGE_VALUE_MIN <= value <= EDGE_VALUE_MAX for value in piece):
                raise PuzzleFormatError(
                    f"edge value out of range on line {line_number}: {line.strip()!r}"
                )

            if not allow_zero_edges and 0 in piece:
                raise PuzzleFormatError(f"edge values must not be zero (line {line_number}).")

            pieces.append(piece)

    if len(pieces) < NUM_SLOTS:
        raise PuzzleFormatError(f"Not enough pieces. Must be {NUM_SLOTS}.")
    if len(pieces) > NUM_SLOTS:
        raise PuzzleFormatError(f"Too many pieces. Must be {NUM_SLOTS}.")

    logger.debug("Loaded %d pieces from %s", len(pieces), file_path)
    return pieces


def get_next_filename(directory, base_name="solutions", extension="parquet"):
    """
    Finds the next available indexed filename in a directory.
    Example: If solutions_1.parquet exists, this will return 'solutions/solutions_2.parquet'.
    """
    os.makedirs(directory, exist_ok=True)

    pattern = re.compile(rf"{re.escape(base_name)}_(\d+)\.{re.escape(extension)}$")

    max_index = 0
    for filename in os.listdir(directory):
        match = pattern.match(filename)
        if match:
            max_index = max(max_index, int(match.group(1)))

    return os.path.join(directory, f"{base_name}_{max_index + 1}.{extension}")


def solution_to_flat_dict(solution):
    """Converts a solution into a flat dictionary keyed by grid cell, for a DataFrame."""
    flat_data = {}
    for slot, (piece, rotation) in enumerate(solution):
        row, col = SLOT_POSITIONS[slot]
        flat_data[f'piece_{row}{col}'] = piece
        flat_data[f'orient_{row}{col}'] = rotation
    return flat_data


class SolutionWriter:
    """Manages writing solutions to a Parquet file in chunks."""
    def __init__(self, file_path, chunk_size=100_000, silent=False):
        self.file_path = file_path
        self.chunk_size = chunk_size
        self.silent = silent
        self.writer = None
        self._solutions_chunk = []
        self.total_solutions_written = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._solutions_chunk:
            self._write_chunk()
        if self.writer is None and exc_type is None:
            # No solutions: still leave a file with the right columns behind
            schema = self._get_schema()
            empty = pd.DataFrame(columns=list(schema)).astype(schema)
            pq.write_table(pa.Table.from_pandas(empty, preserve_index=False), self.file_path)
        if self.writer:
            self.writer.close()
        if not self.silent:
            print(f"✅ Saved {self.total_solutions_written} solution(s) to '{self.file_path}'.")

    def _get_schema(self):
        """Creates the data type schema for the DataFrame."""
        schema = {}
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                schema[f'piece_{row}{col}'] = 'uint8'
                schema[f'orient_{row}{col}'] = 'uint8'
        for key in STAT_KEYS:
            schema[key] = 'uint8'
        return schema

    def _write_chunk(self):
        """Converts the chunk to a DataFrame, applies the schema, and writes to Parquet."""
        if not self._solutions_chunk:
            return

        df = pd.DataFrame(self._solutions_chunk)
        df = df.astype(self._get_schema())

        table = pa.Table.from_pandas(df, preserve_index=False)

        if self.writer is None:
            self.writer = pq.ParquetWriter(self.file_path, table.schema)
        self.writer.write_table(table)

        logger.info("Wrote chunk of %d solution(s) to %s", len(self._solutions_chunk), self.file_path)
        self._solutions_chunk = []

    def process_solutions(self, solutions):
        """Flattens each solution, adds its stats and buffers it for writing."""
        for solution in solutions:
            combined_data = {**solution_to_flat_dict(solution), **calculate_solution_stats(solution)}

            self._solutions_chunk.append(combined_data)
            self.total_solutions_written += 1
            if len(self._solutions_chunk) >= self.chunk_size:
                self._write_chunk()
