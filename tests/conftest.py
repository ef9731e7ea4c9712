import os
import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Worker tests start a QApplication through pytest-qt; keep it headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def random_pixels():
    """A deterministic 64-pixel buffer covering the full byte range."""

    rng = np.random.default_rng(20240611)
    values = rng.integers(0, 256, size=64 * 4, dtype=np.uint8)
    # Pin black and white pixels so both clamp ends are always exercised.
    values[:8] = [0, 0, 0, 0, 255, 255, 255, 255]
    return bytearray(values.tobytes())
