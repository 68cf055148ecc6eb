# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *motifseek*.
The actual functionality lives in the :mod:`motifseek.sequence`
subpackage, that provides nucleotide sequences and the algorithms for
motif discovery built on top of them.
"""

__version__ = "0.1.0"
__name__ = "motifseek"
__author__ = "The motifseek developers"
