import importlib


def test_fintra_server_fastapi_importable() -> None:
    """Regression test: the app must import without an API key configured."""
    module = importlib.import_module("fintra_server_fastapi")
    assert hasattr(module, "app")
