import os
from dataclasses import dataclass
from typing import Optional

GAS_URL_ENV = "GAS_WEB_APP_URL"
SHEETBEST_URL_ENV = "SHEETBEST_URL"
SHEETBEST_KEY_ENV = "SHEETBEST_KEY"
DATA_URL_ENV = "SHEET_API_URL"

DEFAULT_SHEETBEST_URL = "https://api.sheetbest.com/sheets/578f6242-bd5a-4373-8096-2a7c7c6bae62"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ProxyConfig:
    upstream_url: Optional[str]
    api_key: Optional[str] = None

    def require_url(self, env_name):
        if not self.upstream_url:
            raise ConfigError(f"{env_name} is not set")
        return self.upstream_url


# 関数モジュールの import 時に一度だけ読む
def gas_config():
    # e.g. https://script.google.com/macros/s/.../exec
    return ProxyConfig(os.environ.get(GAS_URL_ENV) or None)


def sheetbest_config():
    return ProxyConfig(
        os.environ.get(SHEETBEST_URL_ENV) or DEFAULT_SHEETBEST_URL,
        api_key=os.environ.get(SHEETBEST_KEY_ENV) or None,
    )


def data_config():
    return ProxyConfig(os.environ.get(DATA_URL_ENV) or None)
