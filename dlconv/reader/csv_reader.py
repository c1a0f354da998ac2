from __future__ import annotations

from pathlib import Path

import pandas as pd

from dlconv.errors import ConversionError

"""CSV reader for the dive-log export.

The export is read without a header and without any type inference: every cell
is kept as the exact string found in the file (empty cells stay ""). Blank
lines are skipped. All records must have the same number of fields as the
first one, as any standard CSV reader would require. Bytes that are not valid
UTF-8 are kept as surrogate escapes so they can be written back unchanged.
"""

__all__ = [
    "CsvReadError",
    "read_csv_rows",
]


class CsvReadError(ConversionError):
    """Raised when the input file cannot be opened or parsed as CSV."""


def read_csv_rows(path: Path) -> list[list[str]]:
    """Read a CSV file into a list of rows of cell strings.

    Parameters
    ----------
    path: CSV ファイルパス (dive-log export)

    Returns an empty list for an empty file.
    """
    try:
        df = pd.read_csv(
            path,
            header=None,
            dtype=str,
            keep_default_na=False,  # no "NA"/"null"/"" -> NaN conversion
            skip_blank_lines=True,
            encoding="utf-8",
            # undecodable bytes (cp1252 exports) survive as surrogates
            encoding_errors="surrogateescape",
        )
    except pd.errors.EmptyDataError:
        return []
    except OSError as e:
        raise CsvReadError(f"failed to open {path}: {e}") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise CsvReadError(f"failed to read CSV data from {path}: {e}") from e

    # With keep_default_na=False only fields missing from a short record are NaN
    short = df.isna().any(axis=1)
    if short.any():
        record = int(short.to_numpy().argmax()) + 1
        raise CsvReadError(
            f"failed to read CSV data from {path}: "
            f"record {record}: wrong number of fields (expected {df.shape[1]})"
        )
    return df.to_numpy().tolist()
