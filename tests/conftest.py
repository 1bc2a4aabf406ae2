import http.client
import json
import threading
from http.server import HTTPServer
from unittest import mock

import pytest

from sheetproxy.config import ProxyConfig


class Reply:
    def __init__(self, status, headers, body):
        self.status = status
        self.headers = headers
        self.body = body

    def json(self):
        return json.loads(self.body)


@pytest.fixture
def serve():
    """Run a handler on 127.0.0.1 with its own config and return ``call(method, path, body)``."""
    servers = []

    def start(handler_cls, upstream_url, api_key=None):
        configured = type(handler_cls.__name__, (handler_cls,), {"config": ProxyConfig(upstream_url, api_key)})
        server = HTTPServer(("127.0.0.1", 0), configured)
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        host, port = server.server_address

        def call(method, path="/", body=None, headers=None):
            if isinstance(body, (dict, list)):
                body = json.dumps(body).encode("utf-8")
            elif isinstance(body, str):
                body = body.encode("utf-8")
            conn = http.client.HTTPConnection(host, port, timeout=5)
            try:
                conn.request(method, path, body=body, headers=headers or {})
                resp = conn.getresponse()
                return Reply(resp.status, resp.headers, resp.read())
            finally:
                conn.close()

        return call

    yield start

    for server in servers:
        server.shutdown()
        server.server_close()


@pytest.fixture
def upstream():
    """Patch ``requests.request``; ``upstream.reply(status, content)`` sets the answer."""
    with mock.patch("requests.request") as request:

        def reply(status, content):
            resp = mock.Mock()
            resp.status_code = status
            resp.content = content.encode("utf-8") if isinstance(content, str) else content
            request.return_value = resp

        request.reply = reply
        reply(200, b"{}")
        yield request
