import pytest

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.passforms directory."""
    monkeypatch.setenv("PASSFORMS_HOME", str(tmp_path / "passforms"))
    return tmp_path / "passforms"
