"""Pytest fixtures for codeexplorer tests."""

from pathlib import Path

import pytest
from codeexplorer.app import create_app


@pytest.fixture
def make_repo(tmp_path):
    """
    Factory fixture that writes a source tree under tmp_path.

    Example:
        def test_scan(make_repo):
            repo = make_repo({"a.ts": "function hi() {}", "src/b.js": ""})
            assert scan(repo)
    """

    def _make(files: dict[str, str], name: str = "repo") -> Path:
        root = tmp_path / name
        root.mkdir(exist_ok=True)
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def repo(make_repo):
    """Repository with one file holding three tagged functions."""
    return make_repo(
        {
            "a.ts": "\n".join(
                [
                    "/** @tag util */",
                    "function hi() {}",
                    "/** @tag edge */",
                    "const bye = () => {};",
                    "/** @tag gen */",
                    "function* gen() {}",
                ]
            )
        }
    )


@pytest.fixture
def make_client():
    """Factory fixture for a test client bound to a repository provider."""

    def _make(get_repo_dir):
        app = create_app(get_repo_dir)
        app.config["TESTING"] = True
        return app.test_client()

    return _make
