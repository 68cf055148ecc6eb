import numpy as np
import pytest
import motifseek.sequence as seq


@pytest.fixture(scope="module")
def motif_matrix():
    N_SEQUENCES = 10
    LENGTH = 100

    rng = np.random.default_rng(0)
    return seq.MotifMatrix(
        [seq.random_sequence(LENGTH, rng) for _ in range(N_SEQUENCES)]
    )


@pytest.mark.benchmark
def benchmark_motif_matrix(motif_matrix):
    """
    Compute the counts, profiles and consensus of a motif matrix.
    """
    seq.MotifMatrix(motif_matrix.sequences)


@pytest.mark.benchmark
@pytest.mark.parametrize("k", [8, 15])
def benchmark_search_motifs(motif_matrix, k):
    motif_matrix.search_motifs(k)
