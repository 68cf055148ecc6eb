# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import itertools
import numpy as np
import pytest
import motifseek.sequence as seq


def test_encoding():
    string1 = "AATGCGTTA"
    dna = seq.NucleotideSequence(string1)
    string2 = str(dna)
    assert string1 == string2


def test_lower_case():
    assert str(seq.NucleotideSequence("acgT")) == "ACGT"


@pytest.mark.parametrize("string", ["ACGN", "ACGU", "AC GT", "ACGTÄ"])
def test_invalid_symbol(string):
    with pytest.raises(seq.AlphabetError):
        seq.NucleotideSequence(string)


def test_empty_sequence():
    dna = seq.NucleotideSequence()
    assert len(dna) == 0
    assert str(dna) == ""
    assert dna == seq.NucleotideSequence("")


def test_access():
    string = "AATGCGTTA"
    dna = seq.NucleotideSequence(string)
    assert string[2] == dna[2]
    assert string[-1] == dna[-1]
    assert string == "".join([symbol for symbol in dna])
    dna = dna[3:-2]
    assert "GCGT" == str(dna)
    with pytest.raises(TypeError):
        dna[[0, 1]]


def test_immutability():
    dna = seq.NucleotideSequence("ACGT")
    with pytest.raises(ValueError):
        dna.code[0] = 3
    # Derived sequences do not alter the original one
    dna.mutate(0, "T")
    dna.reverse_complement()
    dna + "A"
    assert str(dna) == "ACGT"


def test_from_code():
    code = np.array([0, 1, 2, 3, 3])
    dna = seq.NucleotideSequence.from_code(code)
    code[0] = 3
    assert str(dna) == "ACGTT"
    with pytest.raises(seq.AlphabetError):
        seq.NucleotideSequence.from_code([0, 4])
    with pytest.raises(seq.AlphabetError):
        seq.NucleotideSequence.from_code([-1, 0])
    # Non-integer codes are not truncated
    with pytest.raises(seq.AlphabetError):
        seq.NucleotideSequence.from_code([0.7, 3.9])
    assert len(seq.NucleotideSequence.from_code([])) == 0


def test_symbols():
    dna = seq.NucleotideSequence("ACGTT")
    assert isinstance(dna.symbols, np.ndarray)
    assert dna.symbols.tolist() == ["A", "C", "G", "T", "T"]


def test_part():
    dna = seq.NucleotideSequence("ACGTA")
    assert str(dna.part(1, 3)) == "CGT"
    assert str(dna.part(0, 5)) == "ACGTA"
    assert len(dna.part(5, 0)) == 0
    with pytest.raises(IndexError):
        dna.part(3, 3)
    with pytest.raises(IndexError):
        dna.part(-1, 2)


def test_mutate():
    dna = seq.NucleotideSequence("ACGTA")
    assert str(dna.mutate(2, "T")) == "ACTTA"
    assert str(dna.mutate(-1, "c")) == "ACGTC"
    with pytest.raises(IndexError):
        dna.mutate(5, "A")
    with pytest.raises(seq.AlphabetError):
        dna.mutate(0, "N")


def test_concatenation():
    str1 = "AAGTTA"
    str2 = "CGA"
    concat_seq = seq.NucleotideSequence(str1) + seq.NucleotideSequence(str2)
    assert str1 + str2 == str(concat_seq)
    concat_seq = seq.NucleotideSequence(str1) + str2
    assert str1 + str2 == str(concat_seq)
    concat_seq = str1 + seq.NucleotideSequence(str2)
    assert isinstance(concat_seq, seq.NucleotideSequence)
    assert str1 + str2 == str(concat_seq)
    with pytest.raises(seq.AlphabetError):
        seq.NucleotideSequence(str1) + "NNN"


def test_reverse_complement():
    string = "ATGGCGTACGATTAGAAAAAAA"
    dna = seq.NucleotideSequence(string)
    assert "TTTTTTTCTAATCGTACGCCAT" == str(dna.reverse_complement())
    assert dna.reverse_complement() == dna.reverse().complement()
    assert dna.reverse_complement() == dna.complement().reverse()


@pytest.mark.parametrize("seed", range(10))
def test_complement_involution(seed):
    dna = seq.random_sequence(50, rng=seed)
    assert dna.complement().complement() == dna
    assert dna.reverse().reverse() == dna
    assert dna.reverse_complement().reverse_complement() == dna


def test_equality_and_hash():
    dna1 = seq.NucleotideSequence("ACGT")
    dna2 = seq.NucleotideSequence("acgt")
    dna3 = seq.NucleotideSequence("ACGA")
    assert dna1 == dna2
    assert hash(dna1) == hash(dna2)
    assert dna1 != dna3
    assert dna1 != "ACGT"
    counts = {dna1: 1}
    counts[dna2] += 1
    assert counts == {dna1: 2}


def test_count():
    dna = seq.NucleotideSequence("ACGCGAGAAAGCGGG")
    assert dna.count("G") == 7
    assert dna.count("t") == 0
    frequency = dna.get_symbol_frequency()
    assert frequency == {"A": 5, "C": 3, "G": 7, "T": 0}
    assert sum(frequency.values()) == len(dna)


def test_random_sequence():
    assert seq.random_sequence(100, rng=1) == seq.random_sequence(100, rng=1)
    rng = np.random.default_rng(0)
    dna = seq.random_sequence(1000, rng)
    assert len(dna) == 1000
    # All nucleotides occur in a long random sequence
    assert all(count > 0 for count in dna.get_symbol_frequency().values())
    assert len(seq.random_sequence(0, rng)) == 0
    with pytest.raises(ValueError):
        seq.random_sequence(-1)


def test_all_sequences():
    sequences = list(seq.all_sequences(3))
    assert len(sequences) == 4**3
    assert len(set(sequences)) == 4**3
    assert sequences == [
        seq.NucleotideSequence("".join(symbols))
        for symbols in itertools.product("ACGT", repeat=3)
    ]
    assert list(seq.all_sequences(0)) == [seq.NucleotideSequence()]
