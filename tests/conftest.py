from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Mapping

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from thing.config import Settings  # noqa: E402

DEFAULT_DESCRIPTOR = "description: test template\nhooks: []\n"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings whose cache lives inside the test's temporary directory."""

    return Settings(cache_root=tmp_path / "cache")


@pytest.fixture()
def make_template(tmp_path: Path) -> Callable[..., Path]:
    """Write a template tree and return its root.

    ``files`` maps relative paths to contents. A minimal descriptor is added
    unless ``descriptor`` is given (``None`` leaves it out entirely).
    """

    counter = iter(range(1000))

    def _make(
        files: Mapping[str, str | bytes],
        *,
        descriptor: str | None = DEFAULT_DESCRIPTOR,
    ) -> Path:
        root = tmp_path / f"template-{next(counter)}"
        root.mkdir()
        if descriptor is not None:
            (root / "thing.template.yaml").write_text(descriptor, encoding="utf-8")
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""

    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path
