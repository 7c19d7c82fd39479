"""
Tests for the DependencyContainer.
"""

from shell_project.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from shell_project.adapters.files.stat_path_identity import StatPathIdentity
from shell_project.config.settings import Settings
from shell_project.entities.command import ShellState
from shell_project.use_cases.commands.dispatcher import CommandDispatcher
from shell_project.utils.path_resolver import PathResolver


class TestDependencyContainer:
    def test_instances_are_shared(self, dependency_container):
        assert dependency_container.get_file_system() is dependency_container.get_file_system()
        assert (
            dependency_container.get_path_resolver()
            is dependency_container.get_path_resolver()
        )

    def test_types(self, dependency_container):
        assert isinstance(dependency_container.get_settings(), Settings)
        assert isinstance(dependency_container.get_path_identity(), StatPathIdentity)
        assert isinstance(dependency_container.get_file_system(), LocalFileSystemAdapter)
        assert isinstance(dependency_container.get_path_resolver(), PathResolver)
        assert isinstance(dependency_container.get_dispatcher(), CommandDispatcher)

    def test_resolver_uses_home_from_environment(self, dependency_container, monkeypatch):
        monkeypatch.setenv("HOME", "/container/home")

        assert dependency_container.get_path_resolver().resolve("~/x") == "/container/home/x"

    def test_dispatcher_uses_ask(self, dependency_container, in_temp_directory):
        asked = []
        dispatcher = dependency_container.get_dispatcher(
            ask=lambda prompt: asked.append(prompt) or "yes"
        )

        result = dispatcher.dispatch("rmdir subdir")

        assert not result.is_error
        assert len(asked) == 1

    def test_ask_is_honoured_after_an_earlier_dispatcher(
        self, dependency_container, in_temp_directory
    ):
        dependency_container.get_dispatcher()

        dispatcher = dependency_container.get_dispatcher(ask=lambda prompt: "y")

        assert not dispatcher.dispatch("rmdir subdir").is_error

    def test_each_session_starts_running(self, dependency_container):
        first = dependency_container.get_dispatcher()
        first.dispatch("exit")

        second = dependency_container.get_dispatcher()

        assert first.state is ShellState.TERMINATED
        assert second.state is ShellState.RUNNING
        assert second.is_running

    def test_reset(self, dependency_container):
        first = dependency_container.get_file_system()

        dependency_container.reset()

        assert dependency_container.get_file_system() is not first
