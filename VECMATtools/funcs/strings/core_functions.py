import numpy as np
from typing import List, Optional, Tuple
from .constants import *

##########################################################################################
# Core functions for parsing vectors from text
##########################################################################################


def digit_runs_core(
    text: str,
    limit: Optional[int] = None) -> List[int]:
    """
    Scan text left to right and return every maximal run of ASCII digits
    as an unsigned integer, in order of appearance. All other characters,
    including '-', '.' and non-ASCII digits, are separators.

    Args:
        text (str): arbitrary text
        limit (int, optional): once a run exceeds limit it stops growing and
                               is reported as limit + 1, so a long run costs
                               linear time. Defaults to None (exact values).

    Returns:
        runs (list): the integers found, possibly empty
    """
    runs = []
    current = None
    for ch in text:
        if ch in DIGITS:
            if current is None:
                current = ord(ch) - ord("0")
            elif limit is None or current <= limit:
                current = current * 10 + (ord(ch) - ord("0"))
                if limit is not None and current > limit:
                    current = limit + 1
        elif current is not None:
            runs.append(current)
            current = None
    if current is not None:
        runs.append(current)

    return runs


def dtype_max_core(
    dtype: np.dtype) -> int:
    """
    Largest integer value representable by a numeric dtype
    """
    if np.issubdtype(dtype, np.integer):
        return int(np.iinfo(dtype).max)
    return int(np.finfo(dtype).max)


def vector_from_string_core(
    text: str,
    dtype: np.dtype) -> Tuple[np.ndarray, bool]:
    """
    Best-effort parse of text into a 1D array of the given dtype.

    A digit run too large for the dtype is stored as the dtype maximum and
    ends the scan, like a failed stream extraction: elements before it are
    kept, everything after it is dropped.

    Args:
        text (str): arbitrary text
        dtype (np.dtype): element dtype of the result

    Returns:
        elements (np.ndarray): shape (N,)
        truncated (bool): True when the scan stopped at an out-of-range run
    """
    limit = dtype_max_core(dtype)
    values = []
    truncated = False
    for value in digit_runs_core(text, limit):
        if value > limit:
            values.append(limit)
            truncated = True
            break
        values.append(value)

    return np.array(values, dtype=dtype), truncated


##########################################################################################
# Core functions for rendering vectors and matrices as text
##########################################################################################


def format_element_core(
    value) -> str:
    """
    Render a single element; floats use %g, integers plain decimal
    """
    if isinstance(value, (float, np.floating)):
        return format(float(value), FLOAT_FORMAT)
    return str(int(value))


def vector_to_string_core(
    elements: List[str]) -> str:
    """
    "[ e0, e1, e2 ]", or "[]" when there are no elements
    """
    if not elements:
        return OPEN_BRACKET + CLOSE_BRACKET
    return (OPEN_BRACKET + " "
            + ELEMENT_SEPARATOR.join(elements)
            + " " + CLOSE_BRACKET)


def matrix_to_string_core(
    rows: List[str]) -> str:
    """
    Multi-line block: "[", one indented row per line with a comma after
    every row but the last, then "]"
    """
    lines = [OPEN_BRACKET]
    for i, row in enumerate(rows):
        sep = ROW_SEPARATOR if i != len(rows) - 1 else ""
        lines.append(ROW_INDENT + row + sep)
    lines.append(CLOSE_BRACKET)

    return "\n".join(lines)
