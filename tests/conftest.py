"""Shared fixtures and project builders for grumpy tests."""

import os
import sys

import pytest

# Ensure tests/ is on sys.path so test files can import fake_cargo
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_cargo import FakeCargo  # noqa: E402
from fake_script_creator import RecordingScriptCreator  # noqa: E402

EXISTING_MAIN = "fn main() { println!(\"original\"); }\n"


def create_binary_project(parent, name="demo", *, main_content=EXISTING_MAIN):
    """Lay out a project the way ``cargo new --bin`` does."""
    src = parent / name / "src"
    src.mkdir(parents=True)
    (parent / name / "Cargo.toml").write_text(f'[package]\nname = "{name}"\n')
    if main_content is not None:
        (src / "main.rs").write_text(main_content)
    return parent / name


def create_library_project(parent, name="demo"):
    """Lay out a project the way ``cargo new --lib`` does."""
    src = parent / name / "src"
    src.mkdir(parents=True)
    (parent / name / "Cargo.toml").write_text(f'[package]\nname = "{name}"\n')
    (src / "lib.rs").write_text("pub fn it_works() {}\n")
    return parent / name


def snapshot_tree(root):
    """Map every path under root to its bytes (None for directories)."""
    tree = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for dirname in dirnames:
            tree[os.path.relpath(os.path.join(dirpath, dirname), root)] = None
        for filename in filenames:
            path = os.path.join(dirpath, filename)
            with open(path, "rb") as f:
                tree[os.path.relpath(path, root)] = f.read()
    return tree


@pytest.fixture
def fake_cargo():
    return FakeCargo()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test with tmp_path as the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def script_creator():
    return RecordingScriptCreator()
