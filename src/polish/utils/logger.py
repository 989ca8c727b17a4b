"""Logger naming for Polish.

Library modules only emit records under the ``polish`` namespace; handlers
and levels are configured by the application, or by ``python -m polish``
(``-v`` enables debug output such as ignored fields in serialized trees).
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``polish`` namespace.

    Module names already under ``polish`` are used unchanged, so
    ``get_logger(__name__)`` in ``polish.serialization`` yields
    ``polish.serialization``; anything else is nested below ``polish``.

    Example:
        >>> get_logger("cli").name
        'polish.cli'
    """
    if not (name == "polish" or name.startswith("polish.")):
        name = f"polish.{name}"
    return logging.getLogger(name)
