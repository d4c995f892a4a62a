import pytest
from pathlib import Path

# Define project root for path fixtures
repo_root = Path(__file__).resolve().parent.parent

@pytest.fixture(scope="session")
def mini_yaml():
    """Path to the minimal YAML config for integration tests"""
    return repo_root / "tests" / "_assets" / "smoke" / "mini.yaml"

@pytest.fixture(scope="session")
def mini_stations_json():
    """Path to the minimal station export for integration tests"""
    return repo_root / "tests" / "_assets" / "smoke" / "mini_stations.json"

@pytest.fixture
def tmp_output_dir(tmp_path, monkeypatch):
    """Output directory inside a temp folder, with the project root as working directory"""
    out = tmp_path / "outputs"
    # Relative input paths in the smoke config resolve against the project root
    monkeypatch.chdir(repo_root)
    return out

# Smoke dataset fixtures
@pytest.fixture(scope="session")
def smoke_records(mini_stations_json):
    """Load the canonical smoke station records."""
    import json
    with mini_stations_json.open(encoding="utf-8") as f:
        return json.load(f)
