import importlib

import pytest

from sheetproxy.routes import DataHandler, SheetBestHandler, SheetHandler


@pytest.mark.parametrize(
    "module, base",
    [
        ("api.sheet", SheetHandler),
        ("api.sheetbest", SheetBestHandler),
        ("api.data", DataHandler),
    ],
)
def test_vercel_handler_class(module, base):
    handler = importlib.import_module(module).handler

    assert issubclass(handler, base)
