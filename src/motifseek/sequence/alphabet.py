# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "motifseek.sequence"
__author__ = "The motifseek developers"
__all__ = [
    "LetterAlphabet",
    "AlphabetError",
    "NUCLEOTIDES",
    "complement_code",
]

import string
from numbers import Integral
import numpy as np


class LetterAlphabet(object):
    """
    This class defines the allowed symbols for a sequence and handles
    the encoding/decoding between symbols and symbol codes.

    A :class:`LetterAlphabet` is created with a list of single letter
    symbols.
    The symbol code of a symbol is the index of that symbol in this
    list.
    The alphabet size is limited to the 94 printable, non-whitespace
    characters.
    Internally the symbols are saved as `uint8` values, which allows
    the encoding and decoding of entire sequences via a lookup table
    instead of a dictionary.

    Objects of this class are immutable.

    Parameters
    ----------
    symbols : iterable object or str or bytes
        The symbols, that are allowed in this alphabet.
        The corresponding code for a symbol, is the index of that symbol
        in this list.

    Examples
    --------

    >>> alph = LetterAlphabet("ACGT")
    >>> print(alph.encode("G"))
    2
    >>> print(alph.decode(2))
    G
    >>> print(alph.encode_multiple("GATTACA"))
    [2 0 3 3 0 1 0]
    >>> try:
    ...    alph.encode("U")
    ... except AlphabetError as e:
    ...    print(e)
    Symbol 'U' is not in the alphabet
    """

    PRINTABLES = (string.digits + string.ascii_letters + string.punctuation).encode(
        "ASCII"
    )
    # Marks a byte value that is not part of the alphabet in the
    # lookup table
    _ILLEGAL = np.iinfo(np.uint8).max

    def __init__(self, symbols):
        if len(symbols) == 0:
            raise ValueError("Symbol list is empty")
        symbol_bytes = []
        for symbol in symbols:
            if not isinstance(symbol, (str, bytes)) or len(symbol) != 1:
                raise ValueError(f"Symbol '{symbol}' is not a single letter")
            if isinstance(symbol, str):
                symbol = symbol.encode("ASCII")
            if symbol not in LetterAlphabet.PRINTABLES:
                raise ValueError(
                    f"Symbol {repr(symbol)} is not printable or whitespace"
                )
            symbol_bytes.append(symbol)
        # Direct 'astype' conversion is not allowed by numpy
        # -> frombuffer()
        self._symbols = np.frombuffer(
            np.array(symbol_bytes, dtype="|S1"), dtype=np.ubyte
        )
        if len(np.unique(self._symbols)) != len(self._symbols):
            raise ValueError("Alphabet contains duplicate symbols")
        self._encode_table = np.full(256, LetterAlphabet._ILLEGAL, dtype=np.uint8)
        self._encode_table[self._symbols] = np.arange(
            len(self._symbols), dtype=np.uint8
        )

    def __repr__(self):
        """Represent LetterAlphabet as a string for debugging."""
        return f"LetterAlphabet({self.get_symbols()})"

    def get_symbols(self):
        """
        Get the symbols in the alphabet.

        Returns
        -------
        symbols : tuple of str
            The symbols.
        """
        return tuple(chr(symbol) for symbol in self._symbols)

    def extends(self, alphabet):
        """
        Check, if this alphabet extends another alphabet.

        An alphabet *extends* another one, if it contains the same
        symbols with the same symbol codes and optionally additional
        symbols.
        Per definition, every alphabet also extends itself.

        Parameters
        ----------
        alphabet : LetterAlphabet
            The potential parent alphabet.

        Returns
        -------
        result : bool
            True, if this object extends `alphabet`, false otherwise.
        """
        if alphabet is self:
            return True
        if len(alphabet) > len(self):
            return False
        return alphabet.get_symbols() == self.get_symbols()[: len(alphabet)]

    def encode(self, symbol):
        """
        Use the alphabet to encode a symbol.

        Parameters
        ----------
        symbol : str or bytes
            The letter to encode into a symbol code.

        Returns
        -------
        code : int
            The symbol code of `symbol`.

        Raises
        ------
        AlphabetError
            If `symbol` is not in the alphabet.
        """
        if not isinstance(symbol, (str, bytes)) or len(symbol) != 1:
            raise AlphabetError(f"Symbol {repr(symbol)} is not a single letter")
        code = self._encode_table[ord(symbol)] if ord(symbol) < 256 else None
        if code is None or code == LetterAlphabet._ILLEGAL:
            raise AlphabetError(f"Symbol {repr(symbol)} is not in the alphabet")
        return int(code)

    def decode(self, code):
        """
        Use the alphabet to decode a symbol code.

        Parameters
        ----------
        code : int
            The symbol code to be decoded.

        Returns
        -------
        symbol : str
            The symbol corresponding to `code`.

        Raises
        ------
        AlphabetError
            If `code` is not a valid code in the alphabet.
        """
        if not isinstance(code, Integral) or code < 0 or code >= len(self._symbols):
            raise AlphabetError(f"'{code}' is not a valid code")
        return chr(self._symbols[code])

    def encode_multiple(self, symbols):
        """
        Encode multiple symbols.

        Parameters
        ----------
        symbols : iterable object or str or bytes
            The symbols to encode. The method is fastest when a
            :class:`ndarray`, :class:`str` or :class:`bytes` object
            containing the symbols is provided, instead of e.g. a list.

        Returns
        -------
        code : ndarray, dtype=uint8
            The sequence code.

        Raises
        ------
        AlphabetError
            If at least one of the symbols is not in the alphabet.
        """
        if isinstance(symbols, str):
            try:
                symbols = np.frombuffer(symbols.encode("ASCII"), dtype=np.ubyte)
            except UnicodeEncodeError:
                illegal = next(char for char in symbols if ord(char) > 127)
                raise AlphabetError(f"Symbol {repr(illegal)} is not in the alphabet")
        elif isinstance(symbols, bytes):
            symbols = np.frombuffer(symbols, dtype=np.ubyte)
        elif isinstance(symbols, np.ndarray):
            try:
                symbols = np.frombuffer(symbols.astype(dtype="|S1"), dtype=np.ubyte)
            except UnicodeEncodeError:
                illegal = next(
                    char for char in "".join(symbols.astype(str)) if ord(char) > 127
                )
                raise AlphabetError(f"Symbol {repr(illegal)} is not in the alphabet")
        else:
            symbols = list(symbols)
            for symbol in symbols:
                if not isinstance(symbol, (str, bytes)) or len(symbol) != 1:
                    raise AlphabetError(
                        f"Symbol {repr(symbol)} is not a single letter"
                    )
            if len(symbols) == 0:
                return np.zeros(0, dtype=np.uint8)
            try:
                symbols = np.frombuffer(
                    np.array(symbols, dtype="|S1"), dtype=np.ubyte
                )
            except UnicodeEncodeError:
                illegal = next(
                    char for char in symbols if isinstance(char, str) and ord(char) > 127
                )
                raise AlphabetError(f"Symbol {repr(illegal)} is not in the alphabet")
        code = self._encode_table[symbols]
        illegal_pos = np.where(code == LetterAlphabet._ILLEGAL)[0]
        if len(illegal_pos) > 0:
            illegal = chr(symbols[illegal_pos[0]])
            raise AlphabetError(f"Symbol {repr(illegal)} is not in the alphabet")
        return code

    def decode_multiple(self, code):
        """
        Decode a sequence code into a list of symbols.

        Parameters
        ----------
        code : ndarray, dtype=uint8
            The sequence code to decode.

        Returns
        -------
        symbols : ndarray, dtype='U1'
            The decoded symbols.

        Raises
        ------
        AlphabetError
            If at least one code is not valid in the alphabet.
        """
        code = np.asarray(code)
        if len(code) == 0:
            return np.zeros(0, dtype="U1")
        if np.any(code < 0) or np.any(code >= len(self._symbols)):
            invalid = code[(code < 0) | (code >= len(self._symbols))][0]
            raise AlphabetError(f"'{invalid}' is not a valid code")
        symbols = self._symbols[code.astype(np.intp, copy=False)]
        # Symbols must be converted from 'np.ubyte' to '|S1'
        return np.frombuffer(symbols.tobytes(), dtype="|S1").astype("U1")

    def __str__(self):
        return str(self.get_symbols())

    def __len__(self):
        return len(self._symbols)

    def __iter__(self):
        return self.get_symbols().__iter__()

    def __contains__(self, symbol):
        if not isinstance(symbol, (str, bytes)) or len(symbol) != 1:
            return False
        return ord(symbol) in self._symbols

    def __hash__(self):
        return hash(self.get_symbols())

    def __eq__(self, item):
        if item is self:
            return True
        if not isinstance(item, LetterAlphabet):
            return False
        return self.get_symbols() == item.get_symbols()


class AlphabetError(Exception):
    """
    This exception is raised, when a code or a symbol is not in an
    :class:`LetterAlphabet`.
    """

    pass


NUCLEOTIDES = LetterAlphabet("ACGT")

# The codes of 'A', 'C', 'G' and 'T' are arranged so that the code of
# the complement is the mirrored code
_COMPLEMENT = np.array([3, 2, 1, 0], dtype=np.uint8)


def complement_code(code):
    """
    Map nucleotide symbol codes to the codes of their complements.

    Parameters
    ----------
    code : int or ndarray
        A single symbol code or an entire sequence code of the
        :data:`NUCLEOTIDES` alphabet.

    Returns
    -------
    complement : int or ndarray, dtype=uint8
        The complementary code(s).
        ``A`` pairs with ``T`` and ``C`` pairs with ``G``.

    Raises
    ------
    AlphabetError
        If a code is not valid in the :data:`NUCLEOTIDES` alphabet.

    Examples
    --------

    >>> code = NUCLEOTIDES.encode_multiple("AACG")
    >>> print(NUCLEOTIDES.decode_multiple(complement_code(code)))
    ['T' 'T' 'G' 'C']
    >>> print(NUCLEOTIDES.decode(complement_code(NUCLEOTIDES.encode("C"))))
    G
    """
    if isinstance(code, Integral):
        if code < 0 or code >= len(_COMPLEMENT):
            raise AlphabetError(f"'{code}' is not a valid code")
        return int(_COMPLEMENT[code])
    code = np.asarray(code)
    if np.any(code < 0) or np.any(code >= len(_COMPLEMENT)):
        raise AlphabetError("The sequence code contains invalid codes")
    return _COMPLEMENT[code.astype(np.intp, copy=False)]
