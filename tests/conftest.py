import sys
from pathlib import Path as _Path

_ROOT = _Path(__file__).resolve().parents[1]
for _p in (_ROOT / "backend", _ROOT):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))
