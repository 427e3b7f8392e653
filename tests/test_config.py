import pytest
import yaml

from c78engine.config import ProjectHistory, WindowConfig


def test_window_config_first_load_creates_file(tmp_path):
    path = tmp_path / "config" / "editor.yml"
    config = WindowConfig(path)
    config.load()
    assert path.exists()
    data = yaml.safe_load(path.read_text())
    assert data["WindowConfig"]["DefaultWindowSize"] == [1920, 1080]
    assert config.last_window_size == (1920, 1080)


def test_window_config_round_trip(tmp_path):
    path = tmp_path / "editor.yml"
    config = WindowConfig(path)
    config.last_window_size = (800, 600)
    config.default_window_size = (1024, 768)
    config.save()
    other = WindowConfig(path)
    other.load()
    assert other.last_window_size == (800, 600)
    assert other.default_window_size == (1024, 768)


def test_window_config_bad_yaml_rewritten(tmp_path):
    path = tmp_path / "editor.yml"
    path.write_text("WindowConfig: [unclosed\n")
    config = WindowConfig(path)
    config.last_window_size = (640, 480)
    config.load()
    assert config.last_window_size == (640, 480)
    data = yaml.safe_load(path.read_text())
    assert data["WindowConfig"]["LastWindowSize"] == [640, 480]


def test_window_config_missing_root_rewritten(tmp_path):
    path = tmp_path / "editor.yml"
    path.write_text("Other: 1\n")
    WindowConfig(path).load()
    data = yaml.safe_load(path.read_text())
    assert "WindowConfig" in data


def test_window_config_malformed_size_raises(tmp_path):
    path = tmp_path / "editor.yml"
    path.write_text("WindowConfig:\n  DefaultWindowSize: [1, 2]\n  LastWindowSize: oops\n")
    with pytest.raises(ValueError):
        WindowConfig(path).load()


def test_project_history_round_trip(tmp_path):
    project = tmp_path / "game.pce"
    project.write_text("")
    path = tmp_path / "cfg" / "LatestProjects.yml"
    history = ProjectHistory(path)
    history.add(project)
    other = ProjectHistory(path)
    other.load()
    assert other.projects == {project}


def test_project_history_filters_missing_and_foreign(tmp_path):
    real = tmp_path / "real.pce"
    real.write_text("")
    other_kind = tmp_path / "notes.txt"
    other_kind.write_text("")
    gone = tmp_path / "gone.pce"
    path = tmp_path / "LatestProjects.yml"
    path.write_text(yaml.safe_dump({"ProjectHistory": [str(real), str(other_kind), str(gone)]}))
    history = ProjectHistory(path)
    history.load()
    assert history.projects == {real}


def test_project_history_save_skips_missing(tmp_path):
    real = tmp_path / "a.pce"
    real.write_text("")
    path = tmp_path / "LatestProjects.yml"
    history = ProjectHistory(path)
    history.projects = {real, tmp_path / "missing.pce"}
    history.save()
    data = yaml.safe_load(path.read_text())
    assert data["ProjectHistory"] == [str(real)]


def test_project_history_first_load_creates_empty(tmp_path):
    path = tmp_path / "sub" / "LatestProjects.yml"
    history = ProjectHistory(path)
    history.load()
    assert yaml.safe_load(path.read_text()) == {"ProjectHistory": []}
    assert history.projects == set()


def test_project_history_non_sequence_rewritten(tmp_path):
    path = tmp_path / "LatestProjects.yml"
    path.write_text("ProjectHistory: just text\n")
    history = ProjectHistory(path)
    history.load()
    assert yaml.safe_load(path.read_text()) == {"ProjectHistory": []}
    assert history.projects == set()