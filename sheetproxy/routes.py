from sheetproxy.config import (
    DATA_URL_ENV,
    GAS_URL_ENV,
    SHEETBEST_URL_ENV,
    data_config,
    gas_config,
    sheetbest_config,
)
from sheetproxy.handler import ProxyHandler
from sheetproxy.upstream import (
    build_target_url,
    encode_json_body,
    forward,
    get_query_param,
    parse_json_body,
    set_query_param,
)


class SheetHandler(ProxyHandler):
    """Apps Script Web App proxy. ``?table=`` picks the sheet (default ``users``).

    GET lists rows, or one row by ``?email=``. POST upserts an object or an
    array of objects. PATCH is sent as POST with ``method=PATCH``.
    """

    allowed_methods = ("GET", "POST", "PATCH", "OPTIONS")
    config = gas_config()

    def target_url(self):
        base_url = self.config.require_url(GAS_URL_ENV)
        return build_target_url(base_url, self.query_string)

    def send_method_not_allowed(self):
        # URL 未設定ならメソッドに関係なく 500
        try:
            self.target_url()
        except Exception as e:
            self.fail(e)
            return
        super().send_method_not_allowed()

    def do_GET(self):
        try:
            status, body = forward("GET", self.target_url())
            self.relay(status, body)
        except Exception as e:
            self.fail(e)

    def do_POST(self):
        try:
            url = self.target_url()
            payload = parse_json_body(self.read_raw_body())
            status, body = forward("POST", url, encode_json_body(payload))
            self.relay(status, body)
        except Exception as e:
            self.fail(e)

    def do_PATCH(self):
        try:
            # GAS は PATCH を受け付けないので POST + method=PATCH で代用する
            url = set_query_param(self.target_url(), "method", "PATCH")
            payload = parse_json_body(self.read_raw_body())

            # email はクエリ優先、なければ body から
            if not get_query_param(url, "email") and isinstance(payload, dict) and payload.get("email"):
                url = set_query_param(url, "email", str(payload["email"]))
            if not get_query_param(url, "email"):
                self.send_json(400, self.error_body("PATCH requires ?email=..."))
                return

            status, body = forward("POST", url, encode_json_body(payload, keep_strings=False))
            self.relay(status, body)
        except Exception as e:
            self.fail(e)


class SheetBestHandler(ProxyHandler):
    allowed_methods = ("POST", "OPTIONS")
    config = sheetbest_config()

    def do_POST(self):
        try:
            # 1行(object)でも複数行(array)でもそのまま送る
            payload = parse_json_body(self.read_raw_body(), strict=True)

            headers = {}
            if self.config.api_key:
                headers["X-API-KEY"] = self.config.api_key

            url = self.config.require_url(SHEETBEST_URL_ENV)
            status, body = forward("POST", url, encode_json_body(payload, falsy_as_empty=False), headers)
            self.relay(status, body)
        except Exception as e:
            self.fail(e)


class DataHandler(ProxyHandler):
    allowed_methods = ("POST", "OPTIONS")
    config = data_config()

    def error_body(self, message):
        return {"error": message}

    def do_POST(self):
        try:
            # 1. URL取得
            gas_url = self.config.require_url(DATA_URL_ENV)

            # 2. アプリからのデータを受け取る
            body = self.read_raw_body()

            # 3. そのままGASに転送する (POST)
            # 読み込み(read)、保存(save)、削除(delete) すべてここで処理します
            status, upstream = forward("POST", gas_url, body)

            # 4. GASからの返事をそのままアプリに返す
            self.relay(status, upstream)
        except Exception as e:
            self.fail(e)
