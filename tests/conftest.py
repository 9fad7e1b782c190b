"""Shared fixtures for treefind tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, excluded by run_tests.py by default")


def create_sample_tree(base_dir: Path) -> Path:
    """Create the smallest tree that exercises files, folders and nesting.

    Structure:
    base_dir/
    ├── a.txt
    └── b/
        └── a.txt
    """
    (base_dir / "b").mkdir()
    (base_dir / "a.txt").write_text("top")
    (base_dir / "b" / "a.txt").write_text("nested")
    return base_dir


def create_project_tree(base_dir: Path) -> Path:
    """Create a deeper tree with mixed names.

    Structure:
    base_dir/
    ├── README.md
    ├── setup.py
    ├── src/
    │   ├── app.py
    │   ├── app_test.py
    │   └── utils/
    │       ├── helpers.py
    │       └── Helpers.txt
    ├── docs/
    │   └── index.md
    └── empty/
    """
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "docs").mkdir()
    (base_dir / "empty").mkdir()
    (base_dir / "README.md").write_text("readme")
    (base_dir / "setup.py").write_text("# setup")
    (base_dir / "src" / "app.py").write_text("# app")
    (base_dir / "src" / "app_test.py").write_text("# test")
    (base_dir / "src" / "utils" / "helpers.py").write_text("# helpers")
    (base_dir / "src" / "utils" / "Helpers.txt").write_text("notes")
    (base_dir / "docs" / "index.md").write_text("# docs")
    return base_dir


@pytest.fixture
def sample_tree(tmp_path):
    return create_sample_tree(tmp_path)


@pytest.fixture
def project_tree(tmp_path):
    return create_project_tree(tmp_path)
