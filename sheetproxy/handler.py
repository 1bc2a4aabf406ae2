import json
import traceback
from http.server import BaseHTTPRequestHandler
from urllib.parse import urlsplit

from sheetproxy.config import ProxyConfig

ALLOW_HEADERS = "Content-Type, Authorization"
BODYLESS_STATUSES = (204, 304)


class ProxyHandler(BaseHTTPRequestHandler):
    """Base for the Vercel functions: CORS on every response, JSON in and out."""

    allowed_methods = ("OPTIONS",)
    config = ProxyConfig(None)

    def __getattr__(self, name):
        # メソッド名は大文字小文字を区別しない。未対応なら 405
        if name.startswith("do_"):
            upper = "do_" + name[3:].upper()
            if upper != name and hasattr(type(self), upper):
                return getattr(self, upper)
            return self.send_method_not_allowed
        raise AttributeError(name)

    @property
    def allow(self):
        return ", ".join(self.allowed_methods)

    @property
    def query_string(self):
        return urlsplit(self.path).query

    def end_headers(self):
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", self.allow)
        self.send_header("Access-Control-Allow-Headers", ALLOW_HEADERS)
        super().end_headers()

    def error_body(self, message):
        return {"ok": False, "error": message}

    def read_raw_body(self):
        content_len = int(self.headers.get("Content-Length", 0))
        if not content_len:
            return b""
        return self.rfile.read(content_len)

    def send_json(self, status, data, extra_headers=None):
        body = json.dumps(data, ensure_ascii=False, allow_nan=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        for name, value in (extra_headers or {}).items():
            self.send_header(name, value)
        self.end_headers()
        self.wfile.write(body)

    def relay(self, status, upstream_body):
        if status in BODYLESS_STATUSES:
            self.send_response(status)
            self.end_headers()
            return
        self.send_json(status, upstream_body.payload())

    def fail(self, exc):
        print(f"Error: {traceback.format_exc()}")
        self.send_json(500, self.error_body(str(exc)))

    def send_method_not_allowed(self):
        self.send_json(405, self.error_body("Method Not Allowed"), {"Allow": self.allow})

    def do_OPTIONS(self):
        # preflight
        self.send_response(204)
        self.end_headers()
