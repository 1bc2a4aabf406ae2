# /api/sheet.py
# Apps Script Web App プロキシ (GET / POST / PATCH)。env: GAS_WEB_APP_URL
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sheetproxy.routes import SheetHandler


class handler(SheetHandler):
    pass
