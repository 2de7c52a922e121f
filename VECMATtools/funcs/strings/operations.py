"""
    VECMATtools String Operations Module

    Conversions between vectors/matrices and text: the best-effort digit-run
    parser used by Vector.from_string, and the display format used by
    to_string. The display format is not meant to be parsed back.

"""

import numpy as np
from typing import Iterable, List
from .core_functions import *


class StringOperations:
    """
    A class to convert numeric arrays to and from text.

    """

    def __init__(
        self,
        debug: bool = False) -> None:
        self.debug = debug


    def parse_vector(
        self,
        text: str,
        dtype: np.dtype) -> np.ndarray:
        """
        Parse every run of ASCII digits in text into one element.

        Args:
            text (str): arbitrary text; anything that is not a digit is a separator
            dtype (np.dtype): element dtype of the result

        Returns:
            elements (np.ndarray): shape (N,), empty when text holds no digits
        """
        elements, truncated = vector_from_string_core(text, np.dtype(dtype))
        if self.debug:
            if truncated:
                print(f"Warning: digit run too large for {np.dtype(dtype)}, stored its maximum and stopped after {elements.shape[0]} elements")
            print(f"StringOperations: parsed {elements.shape[0]} elements from {len(text)} characters")
        return elements


    def vector_to_string(
        self,
        values: Iterable) -> str:
        """Render one row, e.g. "[ 1, 2, 3 ]" """
        return vector_to_string_core([format_element_core(v) for v in values])


    def matrix_to_string(
        self,
        rows: Iterable[Iterable]) -> str:
        """Render rows as an indented multi-line block"""
        rendered: List[str] = [self.vector_to_string(row) for row in rows]
        return matrix_to_string_core(rendered)
