import os

import pytest

from grumpy.project_paths import (
    ProjectTopology,
    detect_topology,
    looks_like_project_root,
    resolve_project_path,
    source_root,
)

from conftest import create_binary_project, create_library_project


@pytest.mark.unit
class TestResolveProjectPath:

    def test_joins_current_directory_with_project_name(self, workdir):
        assert resolve_project_path("demo") == workdir / "demo"

    def test_dot_resolves_to_current_directory(self, workdir):
        assert resolve_project_path(".") == workdir

    def test_result_is_absolute(self, workdir):
        assert resolve_project_path("demo").is_absolute()

    def test_does_not_require_project_to_exist(self, workdir):
        path = resolve_project_path("missing")
        assert not os.path.exists(path)


@pytest.mark.unit
class TestDetectTopology:

    def test_library_when_lib_rs_present(self, tmp_path):
        project = create_library_project(tmp_path)
        assert detect_topology(source_root(project)) is ProjectTopology.LIBRARY

    def test_binary_when_lib_rs_absent(self, tmp_path):
        project = create_binary_project(tmp_path)
        assert detect_topology(source_root(project)) is ProjectTopology.BINARY

    def test_binary_when_source_root_missing(self, tmp_path):
        assert detect_topology(tmp_path / "nowhere" / "src") is ProjectTopology.BINARY

    def test_reflects_filesystem_changes_between_calls(self, tmp_path):
        project = create_binary_project(tmp_path)
        src = source_root(project)
        assert detect_topology(src) is ProjectTopology.BINARY

        (src / "lib.rs").write_text("")
        assert detect_topology(src) is ProjectTopology.LIBRARY


@pytest.mark.unit
class TestLooksLikeProjectRoot:

    def test_true_with_src_directory(self, tmp_path):
        (tmp_path / "src").mkdir()
        assert looks_like_project_root(tmp_path)

    def test_false_without_src_directory(self, tmp_path):
        assert not looks_like_project_root(tmp_path)
