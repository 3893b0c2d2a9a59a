"""Testing helpers for tabquad.

The strategies depend on ``hypothesis`` and ``numpy``, which are not runtime
dependencies of tabquad. Install the ``testing`` extra to use them::

    pip install tabquad[testing]

``import tabquad`` does not import this subpackage.
"""

from . import strategies

__all__ = [
    "strategies",
]
