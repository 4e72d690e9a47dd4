import sys
from pathlib import Path as _P

# Ensure project root (containing the 'tabframe' package directory) is on sys.path
_project_root = _P(__file__).resolve().parents[1]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))
