# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "motifseek.sequence"
__author__ = "The motifseek developers"
__all__ = ["get_skew", "get_min_skew_positions", "get_max_skew_positions"]

import numpy as np

# Contribution of 'A', 'C', 'G' and 'T' to the skew
_SKEW_STEP = np.array([0, -1, 1, 0], dtype=int)


def get_skew(sequence):
    """
    Get the cumulative G-C skew of a sequence.

    The skew at position :math:`i` is the number of ``G`` minus the
    number of ``C`` in the first :math:`i` symbols of the sequence.
    As the skew changes its direction at the origin and the terminus
    of replication, the skew is a proxy for locating these sites in
    bacterial genomes.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to compute the skew for.

    Returns
    -------
    skew : ndarray, dtype=int, shape=(n+1,)
        The skew for each prefix of the sequence.
        The first element is always 0.

    Examples
    --------

    >>> print(get_skew(NucleotideSequence("GCATG")))
    [0 1 0 0 0 1]
    """
    skew = np.zeros(len(sequence) + 1, dtype=int)
    np.cumsum(_SKEW_STEP[sequence.code], out=skew[1:])
    return skew


def get_min_skew_positions(sequence):
    """
    Get all positions where the G-C skew of a sequence is minimal.

    The minimum skew marks a candidate for the origin of replication.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to compute the skew for.

    Returns
    -------
    positions : ndarray, dtype=int
        The ascending positions in the skew array (see
        :func:`get_skew()`), that hold the global minimum.

    Examples
    --------

    >>> print(get_min_skew_positions(NucleotideSequence("GCATG")))
    [0 2 3 4]
    >>> print(get_min_skew_positions(NucleotideSequence("TTCCTGCC")))
    [8]
    """
    skew = get_skew(sequence)
    return np.where(skew == np.min(skew))[0]


def get_max_skew_positions(sequence):
    """
    Get all positions where the G-C skew of a sequence is maximal.

    The maximum skew marks a candidate for the terminus of replication.

    Parameters
    ----------
    sequence : NucleotideSequence
        The sequence to compute the skew for.

    Returns
    -------
    positions : ndarray, dtype=int
        The ascending positions in the skew array (see
        :func:`get_skew()`), that hold the global maximum.
    """
    skew = get_skew(sequence)
    return np.where(skew == np.max(skew))[0]
