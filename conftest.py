"""Pytest configuration."""

import sys
from pathlib import Path

# Ensure the project root is on sys.path so ``tests``, ``benchmarks`` and
# ``stats`` packages are importable when running via ``pytest`` from any directory.
# ``src`` is added too so an uninstalled checkout still finds ``dsviz``.
_project_root = Path(__file__).resolve().parent
for _path in (str(_project_root / "src"), str(_project_root)):
    if _path not in sys.path:
        sys.path.insert(0, _path)
