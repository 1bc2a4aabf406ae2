"""Serverless proxies that relay JSON between the app and spreadsheet backends."""

from sheetproxy.config import ConfigError, ProxyConfig
from sheetproxy.routes import DataHandler, SheetBestHandler, SheetHandler

__all__ = [
    "ConfigError",
    "ProxyConfig",
    "SheetHandler",
    "SheetBestHandler",
    "DataHandler",
]
