# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "motifseek.sequence"
__author__ = "The motifseek developers"
__all__ = [
    "EQUALITY_TOLERANCE",
    "SymbolCount",
    "ColumnProfile",
    "count_columns",
    "profile_columns",
    "conservation_score",
]

from numbers import Integral
import numpy as np
from motifseek.sequence.alphabet import NUCLEOTIDES, AlphabetError
from motifseek.sequence.sequence import LengthMismatchError, NucleotideSequence

# Probabilities closer to each other than this value are treated as
# equal when the most probable symbols are determined
EQUALITY_TOLERANCE = 0.001


def _symbol_to_code(symbol):
    if isinstance(symbol, Integral):
        if symbol < 0 or symbol >= len(NUCLEOTIDES):
            raise AlphabetError(f"'{symbol}' is not a valid code")
        return int(symbol)
    return NUCLEOTIDES.encode(symbol.upper())


class SymbolCount(object):
    """
    The number of occurrences of each nucleotide in a collection of
    symbols, e.g. a column of a motif matrix.

    Objects of this class are immutable.

    Parameters
    ----------
    counts : array-like of int, length=4
        The number of occurrences of ``A``, ``C``, ``G`` and ``T``.

    Attributes
    ----------
    counts : ndarray, dtype=int, shape=(4,)
        The read-only counts in alphabet order.
    total : int
        The total number of counted symbols.

    Examples
    --------

    >>> count = SymbolCount.from_symbols("AACGA")
    >>> print(count["A"], count["T"], count.total)
    3 0 5
    >>> print(count.get_max())
    [('A', 3)]
    >>> print(SymbolCount([2, 2, 0, 1]).get_max())
    [('A', 2), ('C', 2)]
    """

    def __init__(self, counts):
        counts = np.array(counts)
        if counts.shape != (len(NUCLEOTIDES),):
            raise ValueError(
                f"Expected {len(NUCLEOTIDES)} counts, got shape {counts.shape}"
            )
        if not np.issubdtype(counts.dtype, np.integer):
            raise ValueError(f"Counts must be integers, not '{counts.dtype}'")
        counts = counts.astype(int)
        if np.any(counts < 0):
            raise ValueError("Counts must not be negative")
        counts.flags.writeable = False
        self._counts = counts

    @staticmethod
    def from_symbols(symbols):
        """
        Count the nucleotides in a collection of symbols.

        Parameters
        ----------
        symbols : str or iterable object of str or ndarray, dtype=int
            The symbols to be counted.
            An integer :class:`ndarray` is interpreted as sequence code.

        Returns
        -------
        count : SymbolCount
            The counts of the symbols.

        Raises
        ------
        AlphabetError
            If a symbol is not a nucleotide.
        """
        if isinstance(symbols, np.ndarray) and np.issubdtype(symbols.dtype, np.integer):
            code = symbols
            if len(code) > 0 and (np.any(code < 0) or np.any(code >= len(NUCLEOTIDES))):
                raise AlphabetError("The sequence code contains invalid codes")
        elif isinstance(symbols, NucleotideSequence):
            code = symbols.code
        elif isinstance(symbols, str):
            code = NUCLEOTIDES.encode_multiple(symbols.upper())
        else:
            code = NUCLEOTIDES.encode_multiple([symbol.upper() for symbol in symbols])
        return SymbolCount(np.bincount(code, minlength=len(NUCLEOTIDES)))

    @property
    def counts(self):
        return self._counts

    @property
    def total(self):
        return int(np.sum(self._counts))

    def get_max(self):
        """
        Get the nucleotides with the highest count.

        Returns
        -------
        max : list of tuple(str, int)
            The nucleotides that share the highest count together with
            this count, in alphabet order.
        """
        maximum = np.max(self._counts)
        return [
            (symbol, int(count))
            for symbol, count in zip(NUCLEOTIDES, self._counts)
            if count == maximum
        ]

    def normalize(self, factor=None):
        """
        Create a :class:`ColumnProfile` from the counts.

        Parameters
        ----------
        factor : int, optional
            The number of observations used for normalization.
            By default, this is the total count.

        Returns
        -------
        profile : ColumnProfile
            The smoothed probabilities.
        """
        return ColumnProfile(self, factor)

    def __getitem__(self, symbol):
        return int(self._counts[_symbol_to_code(symbol)])

    def __len__(self):
        return len(self._counts)

    def __eq__(self, item):
        if not isinstance(item, SymbolCount):
            return False
        return np.array_equal(self._counts, item._counts)

    def __hash__(self):
        return hash(tuple(self._counts.tolist()))

    def __repr__(self):
        return f"SymbolCount({self._counts.tolist()})"


class ColumnProfile(object):
    r"""
    The probability of each nucleotide in a collection of symbols,
    e.g. a column of a motif matrix.

    The probabilities are derived from a :class:`SymbolCount` using
    *Laplace's rule of succession*, i.e. a pseudocount of 1 is added to
    each nucleotide:

    .. math::

        P(S) = \frac{C_S + 1}{F + 4}

    :math:`C_S`: The count of symbol :math:`S`.

    :math:`F`: The normalization factor, usually the number of counted
    symbols.

    Hence, no nucleotide has a probability of zero.
    If the factor is the total count, the probabilities sum up to 1.

    Objects of this class are immutable.

    Parameters
    ----------
    symbol_count : SymbolCount
        The counts to derive the probabilities from.
    factor : int, optional
        The normalization factor.
        By default, this is the total count of `symbol_count`.
    tolerance : float, optional
        Probabilities that differ less than this value are treated
        as equal in :meth:`get_max()`.
        By default :data:`EQUALITY_TOLERANCE` is used.

    Attributes
    ----------
    symbol_count : SymbolCount
        The underlying counts.
    probabilities : ndarray, dtype=float, shape=(4,)
        The read-only probabilities in alphabet order.
    factor : int
        The normalization factor.
    entropy : float
        The *Shannon entropy* of the probabilities in bits.

    Examples
    --------

    >>> profile = SymbolCount.from_symbols("AACGA").normalize()
    >>> print(profile["A"])
    0.4444444444444444
    >>> print(f"{profile.entropy:.3f}")
    1.837
    >>> print([symbol for symbol, _ in profile.get_max()])
    ['A']
    """

    def __init__(self, symbol_count, factor=None, tolerance=None):
        if factor is None:
            factor = symbol_count.total
        if not isinstance(factor, Integral):
            raise ValueError(
                f"The normalization factor must be an integer, got {factor}"
            )
        if factor < 0:
            raise ValueError("The normalization factor must not be negative")
        if tolerance is None:
            tolerance = EQUALITY_TOLERANCE
        self._symbol_count = symbol_count
        self._factor = int(factor)
        self._tolerance = tolerance
        probabilities = (symbol_count.counts + 1) / (self._factor + len(NUCLEOTIDES))
        probabilities.flags.writeable = False
        self._probabilities = probabilities
        self._entropy = ColumnProfile._compute_entropy(probabilities)
        self._max = self._compute_max()

    @property
    def symbol_count(self):
        return self._symbol_count

    @property
    def probabilities(self):
        return self._probabilities

    @property
    def factor(self):
        return self._factor

    @property
    def entropy(self):
        return self._entropy

    def get_max(self):
        """
        Get the most probable nucleotides.

        The nucleotides are visited in alphabet order and compared to
        the first nucleotide of the current maximum:
        A probability within the tolerance joins the maximum, a higher
        probability replaces it.

        Returns
        -------
        max : list of tuple(str, float)
            The nucleotides that are tied for the highest probability
            together with their probability, in alphabet order.
        """
        return list(self._max)

    def _compute_max(self):
        symbols = NUCLEOTIDES.get_symbols()
        maximum = [(symbols[0], float(self._probabilities[0]))]
        for symbol, value in zip(symbols[1:], self._probabilities[1:]):
            value = float(value)
            if abs(value - maximum[0][1]) < self._tolerance:
                maximum.append((symbol, value))
            elif value > maximum[0][1]:
                maximum = [(symbol, value)]
        return tuple(maximum)

    @staticmethod
    def _compute_entropy(probabilities):
        nonzero = probabilities[probabilities > 0]
        return float(-np.sum(nonzero * np.log2(nonzero)))

    def __getitem__(self, symbol):
        return float(self._probabilities[_symbol_to_code(symbol)])

    def __len__(self):
        return len(self._probabilities)

    def __eq__(self, item):
        if not isinstance(item, ColumnProfile):
            return False
        return (
            self._symbol_count == item._symbol_count
            and self._factor == item._factor
            and self._tolerance == item._tolerance
        )

    def __hash__(self):
        return hash((self._symbol_count, self._factor, self._tolerance))

    def __repr__(self):
        if self._tolerance == EQUALITY_TOLERANCE:
            return f"ColumnProfile({self._symbol_count!r}, factor={self._factor})"
        return (
            f"ColumnProfile({self._symbol_count!r}, factor={self._factor}, "
            f"tolerance={self._tolerance!r})"
        )


def _code_matrix(sequences):
    """
    Stack the codes of equal-length sequences into a
    *(sequences x positions)* matrix.
    """
    if len(sequences) == 0:
        raise ValueError("At least one sequence is required")
    sequences = [
        seq if isinstance(seq, NucleotideSequence) else NucleotideSequence(seq)
        for seq in sequences
    ]
    length = len(sequences[0])
    for i, seq in enumerate(sequences):
        if len(seq) != length:
            raise LengthMismatchError(
                f"All sequences must have the same length, but sequence {i} has "
                f"length {len(seq)} instead of {length}"
            )
    return np.stack([seq.code for seq in sequences]).reshape(len(sequences), length)


def _count_matrix(code_matrix):
    """
    Count the symbols in each column of a code matrix.
    The result has the shape *(positions x symbols)*.
    """
    return np.stack(
        [
            np.count_nonzero(code_matrix == code, axis=0)
            for code in range(len(NUCLEOTIDES))
        ],
        axis=-1,
    ).reshape(code_matrix.shape[1], len(NUCLEOTIDES))


def _score_from_counts(count_matrix):
    return int(np.sum(np.sum(count_matrix, axis=1) - np.max(count_matrix, axis=1)))


def count_columns(sequences):
    """
    Count the nucleotides in each column of a list of equal-length
    sequences.

    Parameters
    ----------
    sequences : list of NucleotideSequence or list of str
        The sequences, where each sequence is a row.

    Returns
    -------
    counts : list of SymbolCount
        The counts for each column.

    Raises
    ------
    ValueError
        If `sequences` is empty.
    LengthMismatchError
        If the sequences have different lengths.

    Examples
    --------

    >>> for count in count_columns(["ACG", "ATG", "CTG"]):
    ...     print(count)
    SymbolCount([2, 1, 0, 0])
    SymbolCount([0, 1, 0, 2])
    SymbolCount([0, 0, 3, 0])
    """
    return [SymbolCount(row) for row in _count_matrix(_code_matrix(sequences))]


def profile_columns(sequences):
    """
    Get the :class:`ColumnProfile` for each column of a list of
    equal-length sequences.

    The number of sequences is used as normalization factor.

    Parameters
    ----------
    sequences : list of NucleotideSequence or list of str
        The sequences, where each sequence is a row.

    Returns
    -------
    profiles : list of ColumnProfile
        The profile for each column.
    """
    return [count.normalize(len(sequences)) for count in count_columns(sequences)]


def conservation_score(sequences):
    """
    Get the conservation score of a list of equal-length sequences.

    The score is the sum over all columns of the number of symbols,
    that differ from the most frequent symbol in that column.
    Hence, the lower the score, the more conserved are the sequences.
    A score of 0 means that all sequences are equal.

    Parameters
    ----------
    sequences : list of NucleotideSequence or list of str
        The sequences, where each sequence is a row.

    Returns
    -------
    score : int
        The conservation score.

    Examples
    --------

    >>> print(conservation_score(["ACG", "ATG", "CTG"]))
    2
    """
    return _score_from_counts(_count_matrix(_code_matrix(sequences)))
