import numpy as np
import pytest
import motifseek.sequence as seq


@pytest.fixture(scope="module")
def sequence():
    LENGTH = 1000

    rng = np.random.default_rng(0)
    return seq.random_sequence(LENGTH, rng)


@pytest.mark.benchmark
@pytest.mark.parametrize("max_mismatches", [1, 3])
def benchmark_wobbles(max_mismatches):
    """
    Create the Hamming neighborhood of a *k-mer*.
    """
    seq.wobbles(seq.NucleotideSequence("ACGTTGCATG"), max_mismatches)


@pytest.mark.benchmark
@pytest.mark.parametrize("reverse_complement", [False, True])
@pytest.mark.parametrize("max_mismatches", [0, 1])
def benchmark_find_all_kmers(sequence, max_mismatches, reverse_complement):
    """
    Map all 9-mers of a sequence to their positions.
    """
    seq.find_all_kmers(sequence, 9, max_mismatches, reverse_complement)


@pytest.mark.benchmark
def benchmark_find_clumping_kmers(sequence):
    seq.find_clumping_kmers(sequence, 500, 9, 3)


@pytest.mark.benchmark
def benchmark_find_pattern_locations(sequence):
    seq.find_pattern_locations(sequence, "ACGTTGCATG", max_mismatches=2)
