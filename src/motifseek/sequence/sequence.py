# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The immutable nucleotide sequence type, that is used throughout
*motifseek*.
"""

__name__ = "motifseek.sequence"
__author__ = "The motifseek developers"
__all__ = [
    "NucleotideSequence",
    "LengthMismatchError",
    "random_sequence",
    "all_sequences",
]

import itertools
from numbers import Integral
import numpy as np
from motifseek.sequence.alphabet import NUCLEOTIDES, AlphabetError, complement_code


class NucleotideSequence(object):
    """
    Representation of an unambiguous DNA sequence.

    The sequence is a succession of the symbols ``A``, ``C``, ``G`` and
    ``T`` of the :data:`NUCLEOTIDES` alphabet.
    Internally, the sequence is saved as a read-only *NumPy*
    :class:`ndarray` of symbol codes, the *sequence code*.

    Objects of this class are immutable value objects:
    Two sequences are equal, if they contain the same symbols, and
    equal sequences have the same hash value.
    Hence, sequences can be used as dictionary keys or set members.
    All transformations return a new sequence.

    Parameters
    ----------
    sequence : str or iterable object of str, optional
        The initial DNA sequence.
        May take upper or lower case letters.
        By default the sequence is empty.

    Raises
    ------
    AlphabetError
        If the sequence contains a symbol other than ``A``, ``C``,
        ``G`` or ``T``.

    Examples
    --------

    >>> dna = NucleotideSequence("acgtta")
    >>> print(dna)
    ACGTTA
    >>> print(dna[1])
    C
    >>> print(dna[1:4])
    CGT
    >>> print(dna.code)
    [0 1 2 3 3 0]
    >>> print(dna.reverse_complement())
    TAACGT
    >>> print(dna + "G")
    ACGTTAG
    >>> dna == NucleotideSequence("ACGTTA")
    True
    """

    alphabet = NUCLEOTIDES

    def __init__(self, sequence=""):
        if isinstance(sequence, str):
            sequence = sequence.upper()
        else:
            sequence = [symbol.upper() for symbol in sequence]
        self._code = NucleotideSequence.alphabet.encode_multiple(sequence)
        self._code.flags.writeable = False

    @staticmethod
    def from_code(code):
        """
        Create a sequence directly from a sequence code.

        Parameters
        ----------
        code : array-like of int
            The sequence code.
            It is copied, so later changes to the input array do not
            affect the sequence.

        Returns
        -------
        sequence : NucleotideSequence
            The sequence with the given code.

        Raises
        ------
        AlphabetError
            If the code contains values that are no valid symbol codes.
        """
        code = np.array(code, copy=True)
        if code.ndim != 1:
            raise ValueError(f"Expected a 1-dimensional code, got {code.ndim} dimensions")
        if len(code) == 0:
            return NucleotideSequence._wrap(np.zeros(0, dtype=np.uint8))
        if not np.issubdtype(code.dtype, np.integer):
            raise AlphabetError(
                f"The sequence code must contain integers, not '{code.dtype}'"
            )
        if np.any(code < 0) or np.any(code >= len(NucleotideSequence.alphabet)):
            raise AlphabetError("The sequence code contains invalid codes")
        return NucleotideSequence._wrap(code.astype(np.uint8))

    @staticmethod
    def _wrap(code):
        """
        Create a sequence from a validated ``uint8`` code without
        copying it.
        """
        sequence = NucleotideSequence.__new__(NucleotideSequence)
        code.flags.writeable = False
        sequence._code = code
        return sequence

    @property
    def code(self):
        """
        The read-only sequence code.
        """
        return self._code

    @property
    def symbols(self):
        """
        The symbols of the sequence as array of letters.
        """
        return NucleotideSequence.alphabet.decode_multiple(self._code)

    def get_alphabet(self):
        """
        Get the :class:`LetterAlphabet` of the sequence.

        Returns
        -------
        alphabet : LetterAlphabet
            The :data:`NUCLEOTIDES` alphabet.
        """
        return NucleotideSequence.alphabet

    def part(self, start, length):
        """
        Get a contiguous part of the sequence.

        Parameters
        ----------
        start : int
            The index of the first symbol of the part.
        length : int
            The number of symbols in the part.

        Returns
        -------
        part : NucleotideSequence
            The part of the sequence.

        Raises
        ------
        IndexError
            If the part would exceed the bounds of the sequence.
        """
        if start < 0 or length < 0 or start + length > len(self):
            raise IndexError(
                f"The part [{start}, {start + length}) exceeds the sequence "
                f"of length {len(self)}"
            )
        return NucleotideSequence._wrap(self._code[start : start + length].copy())

    def mutate(self, index, symbol):
        """
        Get a copy of the sequence, where the symbol at the given
        position is replaced.

        Parameters
        ----------
        index : int
            The position to be mutated.
            Negative indices count from the end of the sequence.
        symbol : str
            The new symbol at this position.

        Returns
        -------
        mutant : NucleotideSequence
            The mutated sequence.

        Raises
        ------
        IndexError
            If `index` is out of the bounds of the sequence.
        AlphabetError
            If `symbol` is not a valid nucleotide.
        """
        if index < -len(self) or index >= len(self):
            raise IndexError(
                f"Index {index} is out of range for a sequence of length {len(self)}"
            )
        code = self._code.copy()
        code[index] = NucleotideSequence.alphabet.encode(symbol.upper())
        return NucleotideSequence._wrap(code)

    def complement(self):
        """
        Get the complement nucleotide sequence.

        Returns
        -------
        complement : NucleotideSequence
            The complement sequence.

        Examples
        --------

        >>> dna_seq = NucleotideSequence("ACGCTT")
        >>> print(dna_seq.complement())
        TGCGAA
        >>> print(dna_seq.reverse().complement())
        AAGCGT
        """
        return NucleotideSequence._wrap(complement_code(self._code))

    def reverse(self):
        """
        Reverse the sequence.

        Returns
        -------
        reversed : NucleotideSequence
            The reversed sequence.

        Examples
        --------

        >>> dna_seq = NucleotideSequence("ACGTA")
        >>> print(dna_seq.reverse())
        ATGCA
        """
        return NucleotideSequence._wrap(self._code[::-1].copy())

    def reverse_complement(self):
        """
        Get the reverse complement of the sequence, i.e. the
        complementary strand read in its own 5'-3' direction.

        Returns
        -------
        reverse_complement : NucleotideSequence
            The reverse complement sequence.
        """
        return NucleotideSequence._wrap(complement_code(self._code[::-1]))

    def count(self, symbol):
        """
        Count the occurrences of a symbol in the sequence.

        Parameters
        ----------
        symbol : str
            The nucleotide to be counted.

        Returns
        -------
        count : int
            The number of occurrences.
        """
        code = NucleotideSequence.alphabet.encode(symbol.upper())
        return int(np.count_nonzero(self._code == code))

    def get_symbol_frequency(self):
        """
        Get the number of occurrences of each symbol in the sequence.

        If a symbol does not occur in the sequence, but it is in the
        alphabet, its number of occurrences is 0.

        Returns
        -------
        frequency : dict
            A dictionary containing the symbols as keys and the
            occurrences in the sequence as values.

        Examples
        --------

        >>> print(NucleotideSequence("ACGCGAGAAAGCGGG").get_symbol_frequency())
        {'A': 5, 'C': 3, 'G': 7, 'T': 0}
        """
        counts = np.bincount(self._code, minlength=len(NucleotideSequence.alphabet))
        return {
            symbol: int(count)
            for symbol, count in zip(NucleotideSequence.alphabet, counts)
        }

    def hamming_distance(self, other):
        """
        Get the number of positions, where this sequence differs from
        another sequence of the same length.

        See :func:`hamming_distance()`.
        """
        # Import at this position to avoid circular import
        from motifseek.sequence.search import hamming_distance

        return hamming_distance(self, other)

    def find_pattern_locations(self, pattern, max_mismatches=0):
        """
        Find the positions where a pattern occurs in this sequence with
        at most the given number of mismatches.

        See :func:`find_pattern_locations()`.
        """
        from motifseek.sequence.search import find_pattern_locations

        return find_pattern_locations(self, pattern, max_mismatches)

    def wobbles(self, max_mismatches):
        """
        Get all sequences within the given Hamming distance of this
        sequence.

        See :func:`wobbles()`.
        """
        from motifseek.sequence.kmer import wobbles

        return wobbles(self, max_mismatches)

    def find_all_kmers(self, k, max_mismatches=0, reverse_complement=False):
        """
        Map each *k-mer* to the positions, where it occurs in this
        sequence.

        See :func:`find_all_kmers()`.
        """
        from motifseek.sequence.kmer import find_all_kmers

        return find_all_kmers(self, k, max_mismatches, reverse_complement)

    def find_clumping_kmers(self, window_size, k, threshold):
        """
        Find the *k-mers* that form clumps in this sequence.

        See :func:`find_clumping_kmers()`.
        """
        from motifseek.sequence.kmer import find_clumping_kmers

        return find_clumping_kmers(self, window_size, k, threshold)

    def get_skew(self):
        """
        Get the cumulative G-C skew of this sequence.

        See :func:`get_skew()`.
        """
        from motifseek.sequence.skew import get_skew

        return get_skew(self)

    def get_min_skew_positions(self):
        """
        Get the positions where the G-C skew of this sequence is
        minimal.

        See :func:`get_min_skew_positions()`.
        """
        from motifseek.sequence.skew import get_min_skew_positions

        return get_min_skew_positions(self)

    def __getitem__(self, index):
        if isinstance(index, Integral):
            return NucleotideSequence.alphabet.decode(self._code[index])
        if isinstance(index, slice):
            return NucleotideSequence._wrap(self._code[index].copy())
        raise TypeError(
            f"'{type(index).__name__}' instances are invalid sequence indices"
        )

    def __len__(self):
        return len(self._code)

    def __iter__(self):
        alphabet = NucleotideSequence.alphabet
        for code in self._code:
            yield alphabet.decode(code)

    def __add__(self, item):
        if isinstance(item, NucleotideSequence):
            other_code = item._code
        elif isinstance(item, str):
            other_code = NucleotideSequence.alphabet.encode_multiple(item.upper())
        else:
            return NotImplemented
        return NucleotideSequence._wrap(np.concatenate([self._code, other_code]))

    def __radd__(self, item):
        if isinstance(item, str):
            other_code = NucleotideSequence.alphabet.encode_multiple(item.upper())
        else:
            return NotImplemented
        return NucleotideSequence._wrap(np.concatenate([other_code, self._code]))

    def __eq__(self, item):
        if item is self:
            return True
        if not isinstance(item, NucleotideSequence):
            return False
        return np.array_equal(self._code, item._code)

    def __hash__(self):
        return hash(self._code.tobytes())

    def __str__(self):
        return "".join(NucleotideSequence.alphabet.decode_multiple(self._code))

    def __repr__(self):
        """Represent NucleotideSequence as a string for debugging."""
        return f'NucleotideSequence("{str(self)}")'


class LengthMismatchError(ValueError):
    """
    This exception is raised, when sequences that are required to have
    the same length have different lengths.
    """

    pass


def random_sequence(length, rng=None):
    """
    Create a random nucleotide sequence, where each symbol is drawn
    from a uniform distribution.

    Parameters
    ----------
    length : int
        The length of the sequence.
    rng : numpy.random.Generator or int, optional
        The random number generator that draws the symbols.
        An integer is interpreted as seed for a new generator.
        By default, a freshly seeded generator is used, i.e. the result
        is not reproducible.

    Returns
    -------
    sequence : NucleotideSequence
        The random sequence.

    Examples
    --------

    >>> rng = np.random.default_rng(0)
    >>> first = random_sequence(20, rng=42)
    >>> second = random_sequence(20, rng=42)
    >>> first == second
    True
    >>> len(random_sequence(5, rng))
    5
    """
    if length < 0:
        raise ValueError("The sequence length must not be negative")
    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)
    code = rng.integers(len(NUCLEOTIDES), size=length, dtype=np.uint8)
    return NucleotideSequence._wrap(code)


def all_sequences(length):
    """
    Iterate over all nucleotide sequences of the given length in
    lexicographical order.

    Note that the number of sequences is ``4**length``, i.e. it grows
    exponentially with the length.

    Parameters
    ----------
    length : int
        The length of the sequences.

    Yields
    ------
    sequence : NucleotideSequence
        All sequences of the given length.

    Examples
    --------

    >>> print([str(seq) for seq in all_sequences(2)][:6])
    ['AA', 'AC', 'AG', 'AT', 'CA', 'CC']
    """
    if length < 0:
        raise ValueError("The sequence length must not be negative")
    for code in itertools.product(range(len(NUCLEOTIDES)), repeat=length):
        yield NucleotideSequence._wrap(np.array(code, dtype=np.uint8))
