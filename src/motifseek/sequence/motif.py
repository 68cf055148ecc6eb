# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "motifseek.sequence"
__author__ = "The motifseek developers"
__all__ = ["MotifMatrix"]

import logging
import numpy as np
from motifseek.sequence.alphabet import NUCLEOTIDES
from motifseek.sequence.kmer import find_all_kmers
from motifseek.sequence.profile import (
    SymbolCount,
    _code_matrix,
    _count_matrix,
    _score_from_counts,
)
from motifseek.sequence.sequence import LengthMismatchError, NucleotideSequence

logger = logging.getLogger(__name__)


def _as_sequence(sequence):
    if isinstance(sequence, NucleotideSequence):
        return sequence
    return NucleotideSequence(sequence)


def _probability_matrix(count_matrix, factor):
    """
    Apply Laplace's rule of succession to a *(positions x symbols)*
    count matrix.
    """
    return (count_matrix + 1) / (factor + len(NUCLEOTIDES))


def _pattern_probabilities(probability_matrix, pattern_codes):
    """
    Get the probability of each pattern in a *(patterns x positions)*
    code matrix.
    """
    positions = np.arange(probability_matrix.shape[0])
    return np.prod(probability_matrix[positions, pattern_codes], axis=-1)


class MotifMatrix(object):
    """
    A motif matrix is a collection of equal-length nucleotide
    sequences, e.g. regulatory regions or candidate motifs, where each
    sequence is a row and each position is a column.

    At construction, the symbols in each column are counted and
    converted into a :class:`ColumnProfile`, using the number of
    sequences as normalization factor.
    From these, the conservation score, the entropy and the consensus
    sequence of the matrix are derived.

    Objects of this class are immutable.

    Parameters
    ----------
    sequences : iterable object of NucleotideSequence or str
        The sequences of the matrix.

    Attributes
    ----------
    sequences : tuple of NucleotideSequence
        The sequences of the matrix.
    length : int
        The common length of the sequences, i.e. the number of columns.
    counts : tuple of SymbolCount
        The nucleotide counts for each column.
    profiles : tuple of ColumnProfile
        The nucleotide probabilities for each column.
    score : int
        The conservation score:
        The sum over all columns of the number of symbols, that differ
        from the most frequent symbol in that column.
        The lower the score, the more conserved is the matrix.
    entropy : float
        The sum of the entropies of all column profiles.
    consensus : NucleotideSequence
        The most probable nucleotide in each column.
        If multiple nucleotides are tied, the first one in alphabet
        order is taken.

    Raises
    ------
    ValueError
        If no sequence is given.
    LengthMismatchError
        If the sequences have different lengths.

    Examples
    --------

    >>> matrix = MotifMatrix(["ACGT", "ACGA", "TCGA"])
    >>> print(matrix)
      A C G T
    0 2 0 0 1
    1 0 3 0 0
    2 0 0 3 0
    3 2 0 0 1
    >>> print(matrix.score)
    2
    >>> print(matrix.consensus)
    ACGA
    >>> print(f"{matrix.entropy:.3f}")
    7.014
    >>> print(f"{matrix.probability('ACGA'):.4f}")
    0.0600
    """

    def __init__(self, sequences):
        self._sequences = tuple(_as_sequence(seq) for seq in sequences)
        code_matrix = _code_matrix(self._sequences)
        self._count_matrix = _count_matrix(code_matrix)
        self._count_matrix.flags.writeable = False

        n_sequences = len(self._sequences)
        self._counts = tuple(SymbolCount(row) for row in self._count_matrix)
        self._profiles = tuple(count.normalize(n_sequences) for count in self._counts)
        self._score = _score_from_counts(self._count_matrix)
        self._entropy = float(sum(profile.entropy for profile in self._profiles))
        self._consensus = NucleotideSequence(
            "".join(profile.get_max()[0][0] for profile in self._profiles)
        )

    @property
    def sequences(self):
        return self._sequences

    @property
    def length(self):
        return len(self._sequences[0])

    @property
    def counts(self):
        return self._counts

    @property
    def profiles(self):
        return self._profiles

    @property
    def score(self):
        return self._score

    @property
    def entropy(self):
        return self._entropy

    @property
    def consensus(self):
        return self._consensus

    def probability_matrix(self):
        """
        Get the position probability matrix of the column profiles.

        Returns
        -------
        ppm : ndarray, dtype=float, shape=(n,4)
            The probability of each nucleotide (columns) at each
            position (rows).
        """
        return _probability_matrix(self._count_matrix, len(self._sequences))

    def probability(self, pattern):
        """
        Get the probability of a pattern based on the column profiles.

        The probability is the product of the probabilities of the
        respective symbol over all positions.

        Parameters
        ----------
        pattern : NucleotideSequence or str
            The pattern.
            It must have the same length as the matrix.

        Returns
        -------
        probability : float
            The probability of the pattern.

        Raises
        ------
        LengthMismatchError
            If the pattern length differs from the matrix length.
        """
        pattern = _as_sequence(pattern)
        if len(pattern) != self.length:
            raise LengthMismatchError(
                f"The pattern has a different length ({len(pattern)}) than "
                f"the motif matrix ({self.length})"
            )
        return float(_pattern_probabilities(self.probability_matrix(), pattern.code))

    def most_probable_pattern(self, patterns):
        """
        Get the most probable pattern from the given patterns, based on
        the column profiles.

        Parameters
        ----------
        patterns : iterable object of NucleotideSequence or str
            The candidate patterns.
            Each pattern must have the same length as the matrix.

        Returns
        -------
        pattern : NucleotideSequence
            The pattern with the highest probability.
            If multiple patterns are tied, the first one is returned.

        Raises
        ------
        ValueError
            If no pattern is given.
        LengthMismatchError
            If a pattern length differs from the matrix length.
        """
        patterns = [_as_sequence(pattern) for pattern in patterns]
        if len(patterns) == 0:
            raise ValueError("At least one pattern is required")
        for pattern in patterns:
            if len(pattern) != self.length:
                raise LengthMismatchError(
                    f"The pattern has a different length ({len(pattern)}) than "
                    f"the motif matrix ({self.length})"
                )
        probabilities = _pattern_probabilities(
            self.probability_matrix(), np.stack([pattern.code for pattern in patterns])
        )
        return patterns[int(np.argmax(probabilities))]

    def search_motifs(self, k):
        """
        Search for a conserved motif of length `k` in the sequences of
        the matrix with a greedy profile-driven search.

        For each *k-mer* of the first sequence a set of motifs is built:
        The *k-mer* is the motif of the first sequence.
        The motif of each subsequent sequence is the *k-mer* of that
        sequence, that is the most probable one in terms of the profile
        of the motifs selected so far.
        The motif set with the lowest conservation score is returned.

        Parameters
        ----------
        k : int
            The length of the motifs.

        Returns
        -------
        motifs : list of NucleotideSequence
            One motif for each sequence of the matrix.

        Raises
        ------
        ValueError
            If `k` is smaller than 1 or larger than the matrix length.

        Notes
        -----
        This is a heuristic:
        The returned motifs are not necessarily the motifs with the
        lowest possible score.
        Ties are always resolved in favor of the first candidate, so
        the result is deterministic.

        Examples
        --------

        >>> matrix = MotifMatrix(["TTACGTT", "GGACGTC", "CCACGTA"])
        >>> print([str(motif) for motif in matrix.search_motifs(4)])
        ['ACGT', 'ACGT', 'ACGT']
        """
        if k < 1 or k > self.length:
            raise ValueError(
                f"The motif length must be between 1 and {self.length}, got {k}"
            )
        sequences = self._sequences
        # The candidates only depend on the sequence,
        # not on the motifs selected so far
        candidates = [None] + [
            list(find_all_kmers(sequence, k).keys()) for sequence in sequences[1:]
        ]
        candidate_codes = [None] + [
            np.stack([kmer.code for kmer in kmers]) for kmers in candidates[1:]
        ]

        best_motifs = [sequence.part(0, k) for sequence in sequences]
        best_score = MotifMatrix._score(best_motifs)
        for i in range(len(sequences[0]) - k + 1):
            motifs = [sequences[0].part(i, k)]
            for j in range(1, len(sequences)):
                count_matrix = _count_matrix(np.stack([motif.code for motif in motifs]))
                probabilities = _pattern_probabilities(
                    _probability_matrix(count_matrix, len(motifs)), candidate_codes[j]
                )
                motifs.append(candidates[j][int(np.argmax(probabilities))])
            score = MotifMatrix._score(motifs)
            if score < best_score:
                logger.debug(
                    f"Motifs seeded at position {i} improve the score "
                    f"from {best_score} to {score}"
                )
                best_motifs = motifs
                best_score = score
        return best_motifs

    @staticmethod
    def _score(motifs):
        return _score_from_counts(
            _count_matrix(np.stack([motif.code for motif in motifs]))
        )

    def __len__(self):
        return len(self._sequences)

    def __iter__(self):
        return iter(self._sequences)

    def __getitem__(self, index):
        return self._sequences[index]

    def __eq__(self, item):
        if not isinstance(item, MotifMatrix):
            return False
        return self._sequences == item._sequences

    def __hash__(self):
        return hash(self._sequences)

    def __str__(self):
        # Add an additional row and column for the position and symbol indicators
        print_matrix = np.full(
            (self._count_matrix.shape[0] + 1, self._count_matrix.shape[1] + 1),
            "",
            dtype=object,
        )
        print_matrix[1:, 1:] = self._count_matrix.astype(str)
        print_matrix[0, 1:] = [str(sym) for sym in NUCLEOTIDES]
        print_matrix[1:, 0] = [str(i) for i in range(self._count_matrix.shape[0])]
        max_len = len(max(print_matrix.flatten(), key=len))
        return "\n".join(
            [
                " ".join([str(cell).rjust(max_len) for cell in row])
                for row in print_matrix
            ]
        )

    def __repr__(self):
        """Represent MotifMatrix as a string for debugging."""
        return f"MotifMatrix({[str(sequence) for sequence in self._sequences]})"
