#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""m6APred Sequence Encoding Module

Splits fixed-length DNA windows (e.g. the DNA_5mer around a candidate m6A
site) into one categorical column per position:

    "ATCGA" -> nt_pos1=A, nt_pos2=T, nt_pos3=C, nt_pos4=G, nt_pos5=A

Every column uses the category levels A, T, C, G, matching the levels the
classifier was trained with.
"""

import logging

import numpy as np
import pandas as pd

from .schema import Nucleotide, levels

logger = logging.getLogger(__name__)

POSITION_PREFIX = 'nt_pos'


class EncodingError(ValueError):
    """Raised when nucleotide windows cannot be split into aligned positions."""


def position_columns(window_length):
    return [f'{POSITION_PREFIX}{i}' for i in range(1, window_length + 1)]


def dna_encoding(dna_strings, strict=False):
    """Encode DNA windows into per-position categorical features.

    Args:
        dna_strings: A window string, a sequence of window strings, or a
            pandas Series of them. All windows must have the length of the
            first one.
        strict: If True, a symbol outside A/T/C/G raises EncodingError.
            Otherwise it is encoded as a missing category.

    Returns:
        pd.DataFrame with columns nt_pos1..nt_posN, one row per window. When
        a Series is passed its index is kept.
    """
    if isinstance(dna_strings, str):
        dna_strings = [dna_strings]

    index = dna_strings.index if isinstance(dna_strings, pd.Series) else None
    windows = list(dna_strings)

    if len(windows) == 0:
        return pd.DataFrame(index=index)

    for i, window in enumerate(windows):
        if not isinstance(window, str):
            raise EncodingError(f"DNA window at row {i} is not a string: {window!r}")

    nn = len(windows[0])
    for i, window in enumerate(windows):
        if len(window) != nn:
            raise EncodingError(
                f"Inconsistent window length: row {i} ('{window}') has length "
                f"{len(window)}, expected {nn}"
            )

    seq_m = np.array([list(window) for window in windows], dtype=object).reshape(len(windows), nn)
    nucleotides = levels(Nucleotide)

    invalid = ~np.isin(seq_m, nucleotides)
    if invalid.any():
        bad = sorted(set(seq_m[invalid]))
        if strict:
            raise EncodingError(f"DNA_5mer character out of domain {nucleotides}: {bad}")
        logger.warning(f"{int(invalid.sum())} nucleotide(s) outside {nucleotides} "
                       f"encoded as missing: {bad}")

    columns = position_columns(nn)
    seq_df = pd.DataFrame(
        {col: pd.Categorical(seq_m[:, j], categories=nucleotides) for j, col in enumerate(columns)},
        index=index,
    )
    return seq_df
