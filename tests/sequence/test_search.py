# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
import motifseek.sequence as seq


def test_hamming_distance():
    assert seq.hamming_distance("GGGCCGTTGGT", "GGACCGTTGAC") == 3
    dna = seq.NucleotideSequence("GGGCCGTTGGT")
    assert dna.hamming_distance(dna) == 0
    assert dna.hamming_distance("GGACCGTTGAC") == 3
    with pytest.raises(seq.LengthMismatchError):
        seq.hamming_distance("ACGT", "ACG")
    # The error is also a 'ValueError'
    with pytest.raises(ValueError):
        seq.hamming_distance("ACGT", "ACG")


@pytest.mark.parametrize("seed", range(5))
def test_hamming_distance_symmetry(seed):
    rng = np.random.default_rng(seed)
    dna1 = seq.random_sequence(30, rng)
    dna2 = seq.random_sequence(30, rng)
    assert seq.hamming_distance(dna1, dna2) == seq.hamming_distance(dna2, dna1)


@pytest.mark.parametrize("max_mismatches", [0, 1, 2, 3])
@pytest.mark.parametrize("seed", range(5))
def test_find_pattern_locations(seed, max_mismatches):
    """
    Compare the pattern search with a naive search over all windows.
    """
    rng = np.random.default_rng(seed)
    dna = seq.random_sequence(200, rng)
    pattern = seq.random_sequence(6, rng)
    ref_locations = [
        i
        for i in range(len(dna) - len(pattern) + 1)
        if seq.hamming_distance(dna.part(i, len(pattern)), pattern) <= max_mismatches
    ]
    test_locations = seq.find_pattern_locations(dna, pattern, max_mismatches)
    assert test_locations.tolist() == ref_locations
    assert dna.find_pattern_locations(pattern, max_mismatches).tolist() == ref_locations


def test_find_pattern_locations_edge_cases():
    dna = seq.NucleotideSequence("ACGT")
    # Pattern equals the sequence
    assert seq.find_pattern_locations(dna, "ACGT").tolist() == [0]
    # Pattern is longer than the sequence
    assert seq.find_pattern_locations(dna, "ACGTA").tolist() == []
    # The number of mismatches covers the entire pattern
    assert seq.find_pattern_locations(dna, "TT", max_mismatches=2).tolist() == [
        0,
        1,
        2,
    ]
    with pytest.raises(ValueError):
        seq.find_pattern_locations(dna, "")
    with pytest.raises(ValueError):
        seq.find_pattern_locations(dna, "A", max_mismatches=-1)


def test_find_subsequence():
    string = "ATACGCTTGCT"
    substring = "GCT"
    main_seq = seq.NucleotideSequence(string)
    sub_seq = seq.NucleotideSequence(substring)
    matches = seq.find_subsequence(main_seq, sub_seq)
    assert matches.tolist() == [4, 8]


def test_find_symbol():
    string = "ATACGCTTGCT"
    symbol = "T"
    dna = seq.NucleotideSequence(string)
    assert seq.find_symbol(dna, symbol).tolist() == [1, 6, 7, 10]
    assert seq.find_symbol_first(dna, symbol) == 1
    assert seq.find_symbol_last(dna, symbol) == 10
    dna = seq.NucleotideSequence("AAAA")
    assert seq.find_symbol(dna, symbol).tolist() == []
    assert seq.find_symbol_first(dna, symbol) == -1
    assert seq.find_symbol_last(dna, symbol) == -1
