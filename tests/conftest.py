import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
PYPI_DIR = REPO_ROOT / "packaging" / "pypi"

if str(PYPI_DIR) not in sys.path:
    sys.path.insert(0, str(PYPI_DIR))
