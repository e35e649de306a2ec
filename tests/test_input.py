import pytest

from aoc23.input import find_project_dir, read_input


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "aoc23"
    (root / "input").mkdir(parents=True)
    (root / "target" / "debug").mkdir(parents=True)
    return root


def test_find_from_nested_directory(project):
    assert find_project_dir(project / "target" / "debug") == project.resolve()


def test_find_from_project_itself(project):
    assert find_project_dir(project) == project.resolve()


def test_find_skips_a_file_start(project):
    exe = project / "target" / "debug" / "p01"
    exe.write_text("binary")
    assert find_project_dir(exe) == project.resolve()


def test_find_defaults_to_cwd(project, monkeypatch):
    monkeypatch.chdir(project / "target")
    assert find_project_dir() == project.resolve()


def test_find_missing_raises(tmp_path):
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    with pytest.raises(FileNotFoundError):
        find_project_dir(elsewhere)


def test_read_input_round_trip(project):
    content = "line one\nline two\n"
    (project / "input" / "p01").write_text(content)
    assert read_input("p01", project / "target" / "debug") == content


def test_read_input_missing_file_raises(project):
    with pytest.raises(FileNotFoundError):
        read_input("p99", project)