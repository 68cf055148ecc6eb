# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for the analysis of nucleotide sequences and the discovery
of sequence motifs.

A :class:`NucleotideSequence` is an immutable succession of the symbols
``'A'``, ``'C'``, ``'G'`` and ``'T'``, that are defined by the
:data:`NUCLEOTIDES` alphabet.
If a :class:`NucleotideSequence` is created with at least one symbol,
that is not in this alphabet, an :class:`AlphabetError` is raised.

Internally, a :class:`NucleotideSequence` is saved as a read-only
*NumPy* :class:`ndarray` of integer values, where each integer
represents a symbol in the alphabet.
``'A'``, ``'C'``, ``'G'`` and ``'T'`` are encoded into 0, 1, 2 and 3,
respectively.
These integer values are called *symbol code*, the encoding of an
entire sequence of symbols is called *sequence code*.
As sequences are value objects, they can be compared with each other
and used as dictionary keys.

Analyses of single sequences comprise

    - pattern search with a maximum number of mismatches
      (:func:`find_pattern_locations()`),
    - the enumeration of all sequences within a *Hamming distance*
      (:func:`wobbles()`),
    - the decomposition into *k-mers* (:func:`find_all_kmers()`) and
      the detection of *k-mer* clumps (:func:`find_clumping_kmers()`),
    - the cumulative G-C skew, as proxy for the origin of replication
      (:func:`get_skew()`).

Multiple sequences of equal length form a :class:`MotifMatrix`.
Each column of the matrix is summarized by a :class:`SymbolCount` and a
:class:`ColumnProfile`, from which the conservation score, the entropy
and the consensus sequence of the matrix are derived.
The column profiles also drive the greedy motif search
(:meth:`MotifMatrix.search_motifs()`).
"""

__name__ = "motifseek.sequence"
__author__ = "The motifseek developers"

from .alphabet import *
from .sequence import *
from .search import *
from .kmer import *
from .skew import *
from .profile import *
from .motif import *
