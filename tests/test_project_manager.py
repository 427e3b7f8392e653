import pytest

from c78engine.project import ProjectConfig, ProjectError
from c78engine.project_manager import ProjectManager
from c78engine.project_serializer import load_project, save_project
from c78engine.project import Project
from c78engine.uuid import UUID


def test_starts_without_project():
    manager = ProjectManager()
    assert manager.has_active_project() is False
    assert manager.active_project_file() is None
    with pytest.raises(ProjectError):
        manager.active_project()


def test_create_project_becomes_active(tmp_path):
    manager = ProjectManager()
    project = manager.create_project(tmp_path / "proj", ProjectConfig(name="Demo"))
    assert manager.active_project() is project
    assert manager.has_active_project_file() is False


def test_save_without_file_or_prompt_returns_false(tmp_path):
    manager = ProjectManager()
    manager.create_project(tmp_path / "proj", ProjectConfig(name="Demo"))
    assert manager.save_project() is False
    assert manager.active_project_file() is None


def test_save_with_file(tmp_path):
    manager = ProjectManager()
    manager.create_project(tmp_path / "proj", ProjectConfig(name="Demo"))
    file = tmp_path / "proj" / "Demo.pce"
    assert manager.save_project(file) is True
    assert file.exists()
    assert manager.active_project_file() == file


def test_save_uses_prompt(tmp_path):
    file = tmp_path / "proj" / "Demo.pce"
    manager = ProjectManager(save_file_prompt=lambda: file)
    manager.create_project(tmp_path / "proj", ProjectConfig(name="Demo"))
    assert manager.save_project() is True
    assert file.exists()


def test_save_without_active_project_raises():
    with pytest.raises(ProjectError):
        ProjectManager().save_project()


def test_close_without_saving(tmp_path):
    manager = ProjectManager()
    manager.create_project(tmp_path / "proj", ProjectConfig(name="Demo"))
    assert manager.close_project(save=False) is True
    assert manager.has_active_project() is False


def test_close_keeps_project_when_save_declined(tmp_path):
    manager = ProjectManager()
    manager.create_project(tmp_path / "proj", ProjectConfig(name="Demo"))
    assert manager.close_project(save=True) is False
    assert manager.has_active_project() is True


def test_close_without_active_project_raises():
    with pytest.raises(ProjectError):
        ProjectManager().close_project(save=False)


def test_open_project(tmp_path):
    file = tmp_path / "proj" / "Demo.pce"
    save_project(Project.create(tmp_path / "proj", ProjectConfig(name="Demo")), file)
    manager = ProjectManager()
    project = manager.open_project(file)
    assert project.project_directory == file.parent
    assert project.config.name == "Demo"
    assert manager.active_project_file() == file


def test_open_saves_previous_project(tmp_path):
    file_a = tmp_path / "a" / "A.pce"
    file_b = tmp_path / "b" / "B.pce"
    save_project(Project.create(tmp_path / "b", ProjectConfig(name="B")), file_b)

    manager = ProjectManager()
    project_a = manager.create_project(tmp_path / "a", ProjectConfig(name="A"))
    manager.save_project(file_a)
    scene = UUID.generate()
    project_a.config.start_scene = scene

    manager.open_project(file_b)
    assert manager.active_project().config.name == "B"
    assert load_project(file_a).config.start_scene == scene


def test_reload_returns_fresh_copy(tmp_path):
    file = tmp_path / "proj" / "Demo.pce"
    manager = ProjectManager()
    active = manager.create_project(tmp_path / "proj", ProjectConfig(name="Demo"))
    manager.save_project(file)
    reloaded = manager.reload_project()
    assert reloaded is not active
    assert reloaded.config == active.config
    assert manager.active_project() is active


def test_reload_without_file_raises(tmp_path):
    manager = ProjectManager()
    manager.create_project(tmp_path / "proj", ProjectConfig(name="Demo"))
    with pytest.raises(ProjectError):
        manager.reload_project()