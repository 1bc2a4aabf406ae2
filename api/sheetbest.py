# /api/sheetbest.py
# SheetBest へ JSON の行を転送する。env: SHEETBEST_URL (任意), SHEETBEST_KEY (任意)
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sheetproxy.routes import SheetBestHandler


class handler(SheetBestHandler):
    pass
