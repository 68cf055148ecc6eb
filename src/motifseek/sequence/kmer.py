# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "motifseek.sequence"
__author__ = "The motifseek developers"
__all__ = [
    "LARGE_NEIGHBORHOOD",
    "neighborhood_size",
    "wobbles",
    "find_all_kmers",
    "find_clumping_kmers",
]

import warnings
from math import comb
import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from motifseek.sequence.alphabet import NUCLEOTIDES
from motifseek.sequence.sequence import NucleotideSequence

# Above this number of sequences :func:`wobbles()` warns about the
# size of the neighborhood
LARGE_NEIGHBORHOOD = 10**6


def neighborhood_size(length, max_mismatches):
    r"""
    Get the number of sequences within the given *Hamming distance* of
    a nucleotide sequence.

    .. math::

        N = \sum_{i=0}^{d} \binom{L}{i} 3^i

    Parameters
    ----------
    length : int
        The length :math:`L` of the sequence.
    max_mismatches : int
        The maximum Hamming distance :math:`d`.

    Returns
    -------
    size : int
        The number of sequences returned by :func:`wobbles()`.

    Examples
    --------

    >>> print(neighborhood_size(2, 1))
    7
    >>> print(neighborhood_size(10, 3))
    3676
    """
    if max_mismatches < 0:
        raise ValueError("The number of mismatches must not be negative")
    n_alternatives = len(NUCLEOTIDES) - 1
    return sum(
        comb(length, i) * n_alternatives**i
        for i in range(min(max_mismatches, length) + 1)
    )


def wobbles(sequence, max_mismatches):
    """
    Get all sequences with the same length as the given sequence,
    whose *Hamming distance* to the sequence is at most
    `max_mismatches`.

    The neighborhood is built from the last position towards the first
    one:
    Each neighbor of the suffix, that has not used up the mismatch
    budget yet, is extended with each nucleotide, all other neighbors
    can only be extended with the original nucleotide.
    Hence, each sequence appears exactly once.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence in the center of the neighborhood.
    max_mismatches : int
        The maximum Hamming distance of the returned sequences to
        `sequence`.

    Returns
    -------
    neighbors : list of NucleotideSequence
        The sequences in the neighborhood, including `sequence` itself.
        The number of neighbors is given by
        :func:`neighborhood_size()`.

    Warns
    -----
    UserWarning
        If the neighborhood contains more than
        :data:`LARGE_NEIGHBORHOOD` sequences.

    Notes
    -----
    The size of the neighborhood grows exponentially with
    `max_mismatches`.
    Use :func:`neighborhood_size()` to estimate the cost in advance.

    Examples
    --------

    >>> neighbors = wobbles(NucleotideSequence("AC"), 1)
    >>> print([str(neighbor) for neighbor in neighbors])
    ['AA', 'AC', 'CC', 'GC', 'TC', 'AG', 'AT']
    >>> print(len(wobbles(NucleotideSequence("ACGTT"), 2)))
    106
    """
    if max_mismatches < 0:
        raise ValueError("The number of mismatches must not be negative")
    if max_mismatches == 0 or len(sequence) == 0:
        return [sequence]

    size = neighborhood_size(len(sequence), max_mismatches)
    if size > LARGE_NEIGHBORHOOD:
        warnings.warn(
            f"The neighborhood of a sequence of length {len(sequence)} with "
            f"{max_mismatches} mismatches contains {size} sequences",
            UserWarning,
        )

    n_symbols = len(NUCLEOTIDES)
    code = sequence.code
    # Start with all neighbors of the last symbol
    neighbors = np.arange(n_symbols, dtype=np.uint8)[:, np.newaxis]
    distances = (neighbors[:, 0] != code[-1]).astype(int)
    for pos in range(len(code) - 2, -1, -1):
        can_vary = distances < max_mismatches
        repeats = np.where(can_vary, n_symbols, 1)
        origin = np.repeat(np.arange(len(neighbors)), repeats)
        # Index of each new row within the block of rows of its origin
        block_index = np.arange(len(origin)) - np.repeat(
            np.cumsum(repeats) - repeats, repeats
        )
        first = np.where(can_vary[origin], block_index, code[pos]).astype(np.uint8)
        neighbors = np.concatenate([first[:, np.newaxis], neighbors[origin]], axis=1)
        distances = distances[origin] + (first != code[pos])

    return [NucleotideSequence._wrap(row.copy()) for row in neighbors]


def find_all_kmers(sequence, k, max_mismatches=0, reverse_complement=False):
    """
    Map each *k-mer* to the positions in a sequence, where it occurs.

    A window of length `k` is slid over the sequence.
    The start position of the window is added to each *k-mer* derived
    from the window content:
    The window content itself, its reverse complement if
    `reverse_complement` is true, and each sequence within
    `max_mismatches` of either of them.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to be decomposed into *k-mers*.
    k : int
        The length of the *k-mers*.
    max_mismatches : int, optional
        If greater than 0, positions are also filed under each *k-mer*
        within this Hamming distance of the window.
    reverse_complement : bool, optional
        If true, positions are also filed under the reverse complement
        of the window, so that a *k-mer* and its reverse complement are
        treated as equal.

    Returns
    -------
    kmers : dict of (NucleotideSequence -> list of int)
        Maps each *k-mer* to the ascending positions where it occurs.
        The keys are ordered by their first occurrence.
        A position appears at most once per *k-mer*, even if the
        *k-mer* is derived multiple times from the same window.
        The dictionary is empty, if `k` is larger than the sequence.

    Notes
    -----
    Positions are accumulated:
    If two different windows lead to the same *k-mer*, the *k-mer* is
    mapped to the positions of both windows.

    Examples
    --------

    >>> dna = NucleotideSequence("ACGTACG")
    >>> for kmer, positions in find_all_kmers(dna, 3).items():
    ...     print(kmer, positions)
    ACG [0, 4]
    CGT [1]
    GTA [2]
    TAC [3]
    >>> for kmer, positions in find_all_kmers(dna, 3, reverse_complement=True).items():
    ...     print(kmer, positions)
    ACG [0, 1, 4]
    CGT [0, 1, 4]
    GTA [2, 3]
    TAC [2, 3]
    """
    if k < 1:
        raise ValueError("The k-mer length must be at least 1")
    if max_mismatches < 0:
        raise ValueError("The number of mismatches must not be negative")
    kmers = {}
    if k > len(sequence):
        return kmers

    neighborhoods = {}
    for i, window in enumerate(sliding_window_view(sequence.code, k)):
        kmer = NucleotideSequence._wrap(window.copy())
        sources = [kmer]
        if reverse_complement:
            sources.append(kmer.reverse_complement())
        for source in sources:
            if max_mismatches == 0:
                keys = (source,)
            else:
                keys = neighborhoods.get(source)
                if keys is None:
                    keys = wobbles(source, max_mismatches)
                    neighborhoods[source] = keys
            for key in keys:
                positions = kmers.setdefault(key, [])
                if len(positions) == 0 or positions[-1] != i:
                    positions.append(i)
    return kmers


def find_clumping_kmers(sequence, window_size, k, threshold):
    """
    Find the *k-mers* that form clumps in a sequence.

    A *k-mer* forms a clump, if it occurs at least `threshold` times
    within a window of length `window_size`.
    Concretely, a *k-mer* with the ascending positions :math:`P` is
    reported, if :math:`P_{i+t-1} - P_i + 1 \\leq w - k` for some
    :math:`i`, where :math:`t` is the threshold and :math:`w` the
    window size.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to find clumps in.
    window_size : int
        The length of the window.
    k : int
        The length of the *k-mers*.
    threshold : int
        The minimum number of occurrences within the window.

    Returns
    -------
    clumping_kmers : list of NucleotideSequence
        The distinct *k-mers* forming at least one clump, ordered by
        their first occurrence.

    Examples
    --------

    >>> dna = NucleotideSequence("AAAACGTCGAAAAA")
    >>> print([str(kmer) for kmer in find_clumping_kmers(dna, 4, 2, 2)])
    ['AA']
    """
    if threshold < 1:
        raise ValueError("The threshold must be at least 1")
    clumping_kmers = []
    for kmer, positions in find_all_kmers(sequence, k).items():
        if len(positions) < threshold:
            continue
        positions = np.asarray(positions)
        # Span of each run of 'threshold' consecutive occurrences
        spans = (
            positions[threshold - 1 :] - positions[: len(positions) - threshold + 1] + 1
        )
        if np.any(spans <= window_size - k):
            clumping_kmers.append(kmer)
    return clumping_kmers
