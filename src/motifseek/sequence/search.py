# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "motifseek.sequence"
__author__ = "The motifseek developers"
__all__ = [
    "hamming_distance",
    "find_pattern_locations",
    "find_subsequence",
    "find_symbol",
    "find_symbol_first",
    "find_symbol_last",
]

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from motifseek.sequence.sequence import LengthMismatchError, NucleotideSequence


def _as_sequence(sequence):
    if isinstance(sequence, NucleotideSequence):
        return sequence
    return NucleotideSequence(sequence)


def hamming_distance(sequence1, sequence2):
    """
    Get the *Hamming distance* between two sequences, i.e. the number
    of positions at which the corresponding symbols differ.

    Parameters
    ----------
    sequence1, sequence2 : NucleotideSequence or str
        The sequences to be compared.

    Returns
    -------
    distance : int
        The Hamming distance.

    Raises
    ------
    LengthMismatchError
        If the sequences have different lengths.

    Examples
    --------

    >>> print(hamming_distance(
    ...     NucleotideSequence("GGGCCGTTGGT"), NucleotideSequence("GGACCGTTGAC")
    ... ))
    3
    """
    sequence1 = _as_sequence(sequence1)
    sequence2 = _as_sequence(sequence2)
    if len(sequence1) != len(sequence2):
        raise LengthMismatchError(
            f"The sequences must have the same length, "
            f"got {len(sequence1)} and {len(sequence2)}"
        )
    return int(np.count_nonzero(sequence1.code != sequence2.code))


def find_pattern_locations(sequence, pattern, max_mismatches=0):
    """
    Find a pattern in a sequence, allowing a maximum number of
    mismatches.

    Each window of the sequence with the same length as the pattern is
    compared to the pattern.
    The start position of the window is reported, if the
    *Hamming distance* between window and pattern is at most
    `max_mismatches`.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to find the pattern in.
    pattern : NucleotideSequence or str
        The pattern to be found.
    max_mismatches : int, optional
        The maximum number of mismatches between pattern and a
        matching window.
        By default, only exact matches are reported.

    Returns
    -------
    match_indices : ndarray, dtype=int
        The ascending start positions of the matching windows.
        The array is empty if no match has been found or the pattern is
        longer than the sequence.

    Raises
    ------
    ValueError
        If the pattern is empty or `max_mismatches` is negative.

    Examples
    --------

    >>> dna = NucleotideSequence("AACGTACG")
    >>> print(find_pattern_locations(dna, "AAG"))
    []
    >>> print(find_pattern_locations(dna, "AAG", max_mismatches=1))
    [0 1 5]
    """
    sequence = _as_sequence(sequence)
    pattern = _as_sequence(pattern)
    if len(pattern) == 0:
        raise ValueError("The pattern must not be empty")
    if max_mismatches < 0:
        raise ValueError("The number of mismatches must not be negative")
    if len(pattern) > len(sequence):
        return np.zeros(0, dtype=int)
    windows = sliding_window_view(sequence.code, len(pattern))
    mismatches = np.count_nonzero(windows != pattern.code, axis=1)
    return np.where(mismatches <= max_mismatches)[0]


def find_subsequence(sequence, query):
    """
    Find a subsequence in a sequence.

    This is equivalent to :func:`find_pattern_locations()` without
    mismatches.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to find the subsequence in.
    query : NucleotideSequence or str
        The potential subsequence.

    Returns
    -------
    match_indices : ndarray
        The starting indices in `sequence`, where `query` has been
        found. The array is empty if no match has been found.

    Examples
    --------

    >>> main_seq = NucleotideSequence("ACTGAATGA")
    >>> sub_seq = NucleotideSequence("TGA")
    >>> print(find_subsequence(main_seq, sub_seq))
    [2 6]
    """
    return find_pattern_locations(sequence, query, max_mismatches=0)


def find_symbol(sequence, symbol):
    """
    Find a symbol in a sequence.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to find the symbol in.
    symbol : str
        The symbol to be found in `sequence`.

    Returns
    -------
    match_indices : ndarray
        The indices in `sequence`, where `symbol` has been found.
    """
    code = sequence.get_alphabet().encode(symbol.upper())
    return np.where(sequence.code == code)[0]


def find_symbol_first(sequence, symbol):
    """
    Find first occurence of a symbol in a sequence.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to find the symbol in.
    symbol : str
        The symbol to be found in `sequence`.

    Returns
    -------
    first_index : int
        The first index of `symbol` in `sequence`. If `symbol` is not in
        `sequence`, -1 is returned.
    """
    match_i = find_symbol(sequence, symbol)
    if len(match_i) == 0:
        return -1
    return int(np.min(match_i))


def find_symbol_last(sequence, symbol):
    """
    Find last occurence of a symbol in a sequence.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to find the symbol in.
    symbol : str
        The symbol to be found in `sequence`.

    Returns
    -------
    last_index : int
        The last index of `symbol` in `sequence`. If `symbol` is not in
        `sequence`, -1 is returned.
    """
    match_i = find_symbol(sequence, symbol)
    if len(match_i) == 0:
        return -1
    return int(np.max(match_i))
