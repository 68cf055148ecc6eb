# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from importlib import import_module
import pytest
import motifseek.sequence as seq


@pytest.mark.parametrize(
    "length, max_mismatches", [(1, 1), (3, 1), (4, 2), (5, 3), (3, 3), (2, 5)]
)
def test_wobbles(length, max_mismatches):
    """
    Compare the neighborhood with all sequences of the same length,
    that are within the Hamming distance.
    """
    dna = seq.random_sequence(length, rng=length)
    neighbors = seq.wobbles(dna, max_mismatches)
    ref_neighbors = set(
        candidate
        for candidate in seq.all_sequences(length)
        if seq.hamming_distance(candidate, dna) <= max_mismatches
    )
    # Each neighbor appears exactly once
    assert len(neighbors) == len(set(neighbors))
    assert set(neighbors) == ref_neighbors
    assert len(neighbors) == seq.neighborhood_size(length, max_mismatches)
    assert dna in neighbors


def test_wobbles_order():
    dna = seq.NucleotideSequence("AC")
    assert [str(neighbor) for neighbor in dna.wobbles(1)] == [
        "AA",
        "AC",
        "CC",
        "GC",
        "TC",
        "AG",
        "AT",
    ]


def test_wobbles_without_mismatches():
    dna = seq.NucleotideSequence("ACGT")
    assert seq.wobbles(dna, 0) == [dna]
    assert seq.wobbles(seq.NucleotideSequence(), 2) == [seq.NucleotideSequence()]
    with pytest.raises(ValueError):
        seq.wobbles(dna, -1)


def test_large_neighborhood_warning(monkeypatch):
    kmer_module = import_module("motifseek.sequence.kmer")
    monkeypatch.setattr(kmer_module, "LARGE_NEIGHBORHOOD", 10)
    dna = seq.NucleotideSequence("ACGT")
    with pytest.warns(UserWarning):
        neighbors = seq.wobbles(dna, 1)
    assert len(neighbors) == 13


@pytest.mark.parametrize(
    "length, max_mismatches, exp_size",
    [(0, 2, 1), (1, 1, 4), (2, 1, 7), (3, 0, 1), (3, 3, 64), (3, 10, 64)],
)
def test_neighborhood_size(length, max_mismatches, exp_size):
    assert seq.neighborhood_size(length, max_mismatches) == exp_size


def test_find_all_kmers():
    dna = seq.NucleotideSequence("ACGTACG")
    kmers = seq.find_all_kmers(dna, 3)
    assert {str(kmer): positions for kmer, positions in kmers.items()} == {
        "ACG": [0, 4],
        "CGT": [1],
        "GTA": [2],
        "TAC": [3],
    }
    assert dna.find_all_kmers(3) == kmers


def test_find_all_kmers_edge_cases():
    dna = seq.NucleotideSequence("ACGT")
    assert seq.find_all_kmers(dna, 5) == {}
    assert seq.find_all_kmers(dna, 4) == {dna: [0]}
    # 'ACGT' is its own reverse complement, but the position is only
    # reported once
    assert seq.find_all_kmers(dna, 4, reverse_complement=True) == {dna: [0]}
    with pytest.raises(ValueError):
        seq.find_all_kmers(dna, 0)
    with pytest.raises(ValueError):
        seq.find_all_kmers(dna, 2, max_mismatches=-1)


@pytest.mark.parametrize("reverse_complement", [False, True])
@pytest.mark.parametrize("max_mismatches", [0, 1, 2])
@pytest.mark.parametrize("seed", range(3))
def test_find_all_kmers_reference(seed, max_mismatches, reverse_complement):
    """
    Compare the k-mer positions with a naive approach, that checks
    each possible k-mer against each window of the sequence.
    """
    K = 3
    dna = seq.random_sequence(40, rng=seed)
    windows = [dna.part(i, K) for i in range(len(dna) - K + 1)]
    ref_kmers = {}
    for kmer in seq.all_sequences(K):
        positions = []
        for i, window in enumerate(windows):
            sources = [window]
            if reverse_complement:
                sources.append(window.reverse_complement())
            if any(
                seq.hamming_distance(kmer, source) <= max_mismatches
                for source in sources
            ):
                positions.append(i)
        if len(positions) > 0:
            ref_kmers[kmer] = positions

    test_kmers = seq.find_all_kmers(dna, K, max_mismatches, reverse_complement)
    assert test_kmers == ref_kmers
    # The k-mers are ordered by their first occurrence
    first_positions = [positions[0] for positions in test_kmers.values()]
    assert first_positions == sorted(first_positions)


@pytest.mark.parametrize("max_mismatches", [0, 1])
def test_find_all_kmers_strand_symmetry(max_mismatches):
    """
    If the reverse complement is taken into account, each *k-mer* has
    the same positions as its reverse complement.
    """
    dna = seq.random_sequence(100, rng=0)
    kmers = seq.find_all_kmers(dna, 4, max_mismatches, reverse_complement=True)
    for kmer, positions in kmers.items():
        assert kmers[kmer.reverse_complement()] == positions


def test_find_clumping_kmers():
    dna = seq.NucleotideSequence(
        "CGGACTCGACAGATGTGAAGAACGACAATGTGAAGACTCGACACGACAGAGTGAAGAGAAGAGG"
        "AAACATTGTAA"
    )
    clumps = seq.find_clumping_kmers(dna, 50, 5, 4)
    assert [str(kmer) for kmer in clumps] == ["CGACA", "GAAGA"]
    assert dna.find_clumping_kmers(50, 5, 4) == clumps


def test_find_clumping_kmers_window_boundary():
    """
    The occurrences of a clump must span at most the window size
    minus the *k-mer* length.
    """
    # 'AC' spans 5 symbols, 'GG' spans 2 symbols
    dna = seq.NucleotideSequence("ACTTACGGG")
    assert [str(kmer) for kmer in seq.find_clumping_kmers(dna, 7, 2, 2)] == [
        "AC",
        "GG",
    ]
    assert [str(kmer) for kmer in seq.find_clumping_kmers(dna, 6, 2, 2)] == ["GG"]
    assert seq.find_clumping_kmers(dna, 3, 2, 2) == []


def test_find_clumping_kmers_threshold():
    dna = seq.NucleotideSequence("ACTTACGGG")
    # With a threshold of 1 each k-mer forms a clump, if the window is
    # large enough
    assert seq.find_clumping_kmers(dna, 3, 2, 1) == list(
        seq.find_all_kmers(dna, 2).keys()
    )
    assert seq.find_clumping_kmers(dna, 50, 2, 3) == []
    with pytest.raises(ValueError):
        seq.find_clumping_kmers(dna, 7, 2, 0)
