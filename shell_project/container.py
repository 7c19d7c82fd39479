"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Callable, Optional

from shell_project.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from shell_project.adapters.files.stat_path_identity import StatPathIdentity
from shell_project.config.settings import Settings
from shell_project.ports.files.file_system_port import FileSystemPort
from shell_project.ports.files.path_identity_port import PathIdentityPort
from shell_project.use_cases.commands.dispatcher import CommandDispatcher
from shell_project.utils.path_resolver import PathResolver


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get the settings instance.

        Returns:
            Settings loaded from the environment
        """
        if "settings" not in self._instances:
            from shell_project.config.settings import settings

            self._instances["settings"] = settings
        return self._instances["settings"]

    def get_path_identity(self) -> PathIdentityPort:
        """
        Get path identity comparator instance.

        Returns:
            PathIdentityPort implementation
        """
        if "path_identity" not in self._instances:
            self._instances["path_identity"] = StatPathIdentity(self._logger)
        return self._instances["path_identity"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(
                self.get_path_identity(), self._logger
            )
        return self._instances["file_system"]

    def get_path_resolver(self) -> PathResolver:
        """
        Get path resolver expanding "~" with the configured home directory.

        Returns:
            Configured PathResolver
        """
        if "path_resolver" not in self._instances:
            self._instances["path_resolver"] = PathResolver(
                self.get_settings().home_directory
            )
        return self._instances["path_resolver"]

    def get_dispatcher(
        self, ask: Optional[Callable[[str], str]] = None
    ) -> CommandDispatcher:
        """
        Create a command dispatcher for a new session.

        Each call returns a fresh dispatcher in the RUNNING state; the
        file system, resolver and settings behind it are shared.

        Args:
            ask: Reads the reply to confirmation prompts

        Returns:
            Configured CommandDispatcher
        """
        return CommandDispatcher(
            self.get_file_system(),
            self.get_path_resolver(),
            ask=ask,
            affirmative=self.get_settings().confirm_tokens,
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
