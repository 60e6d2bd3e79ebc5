"""Checkout shim so ``python -m latynka.cli.*`` works without installing.

The real modules live under ``src/latynka``; append that directory to the
package search path when running from a source tree.
"""

from __future__ import annotations

from pathlib import Path

_SRC_PACKAGE = Path(__file__).resolve().parent.parent / "src" / "latynka"

if _SRC_PACKAGE.is_dir():
    __path__.append(str(_SRC_PACKAGE))
