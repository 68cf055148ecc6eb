# This source code is part of the motifseek package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import doctest
from importlib import import_module
import numpy as np
import pytest


@pytest.mark.parametrize(
    "package_name, context_package_names",
    [
        pytest.param("motifseek", []),
        pytest.param("motifseek.sequence", []),
    ],
)
def test_doctest(package_name, context_package_names):
    """
    Run all doctest strings in all motifseek subpackages.
    """
    # Collect all attributes of this package and its subpackages
    # as globals for the doctests
    globs = {}
    # The package itself is also used as context
    for name in context_package_names + [package_name]:
        context_package = import_module(name)
        globs.update(
            {attr: getattr(context_package, attr) for attr in dir(context_package)}
        )
    # Add frequently used modules
    globs["np"] = np

    # Adjust NumPy print formatting
    np.set_printoptions(precision=3, floatmode="maxprec_equal")

    package = import_module(package_name)
    runner = doctest.DocTestRunner(
        verbose=False,
        optionflags=doctest.ELLIPSIS
        | doctest.REPORT_ONLY_FIRST_FAILURE
        | doctest.NORMALIZE_WHITESPACE,
    )
    for test in doctest.DocTestFinder(exclude_empty=False).find(
        package,
        package.__name__,
        # Setting 'module=False' omits the check, whether an attribute
        # is defined in the package itself, so that the attributes
        # imported from the submodules are tested as well
        module=False,
        extraglobs=globs,
    ):
        runner.run(test)
    results = doctest.TestResults(runner.failures, runner.tries)
    try:
        assert results.failed == 0
    except AssertionError:
        print(f"Failing doctest in module {package}")
        raise
