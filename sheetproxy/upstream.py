import json
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests

DEFAULT_TABLE = "users"


def _split_query(url):
    parts = urlsplit(url)
    return parts, dict(parse_qsl(parts.query, keep_blank_values=True))


def _join_query(parts, query):
    return urlunsplit(parts._replace(query=urlencode(query, safe="@")))


def build_target_url(base_url, query_string=""):
    """Copy the inbound query onto ``base_url``; inbound values win.

    A missing or empty ``table`` defaults to ``users`` so one endpoint can
    address every sheet of the Web App.
    """
    parts, query = _split_query(base_url)
    query.update(parse_qsl(query_string, keep_blank_values=True))
    if not query.get("table"):
        query["table"] = DEFAULT_TABLE
    return _join_query(parts, query)


def set_query_param(url, name, value):
    parts, query = _split_query(url)
    query[name] = value
    return _join_query(parts, query)


def get_query_param(url, name):
    return _split_query(url)[1].get(name)


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(text):
    # NaN / Infinity は JSON ではない
    return json.loads(text, parse_constant=_reject_constant)


def parse_json_body(raw, strict=False):
    """Empty body -> ``{}``. Bad JSON -> ``{}``, or re-raised when ``strict``."""
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        if not raw or not raw.strip():
            return {}
        return loads_strict(raw)
    except ValueError:
        if strict:
            raise
        return {}


def encode_json_body(body, keep_strings=True, falsy_as_empty=True):
    """Serialize a parsed body for the upstream.

    With ``keep_strings`` a string body is forwarded as-is instead of being
    quoted. With ``falsy_as_empty`` ``null``, ``false``, ``0`` and ``""`` are
    sent as ``{}``; empty arrays and objects are kept.
    """
    if keep_strings and isinstance(body, str):
        return body.encode("utf-8")
    if falsy_as_empty and not body and not isinstance(body, (list, dict)):
        body = {}
    return json.dumps(body, allow_nan=False).encode("utf-8")


@dataclass(frozen=True)
class UpstreamBody:
    value: Any
    raw: bool = False

    def payload(self):
        if self.raw:
            return {"raw": self.value}
        return self.value


def decode_upstream(text):
    try:
        return UpstreamBody(loads_strict(text))
    except ValueError:
        return UpstreamBody(text, raw=True)


def forward(method, url, body=None, headers=None):
    send_headers = dict(headers or {})
    if body is not None:
        send_headers.setdefault("Content-Type", "application/json")

    resp = requests.request(method, url, data=body, headers=send_headers)
    # 先頭の BOM は捨てる
    text = resp.content.decode("utf-8-sig", errors="replace")
    return resp.status_code, decode_upstream(text)
