# /api/data.py
# アプリからのリクエストをそのまま GAS に転送する。env: SHEET_API_URL
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sheetproxy.routes import DataHandler


class handler(DataHandler):
    pass
