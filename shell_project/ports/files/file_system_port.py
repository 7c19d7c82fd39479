"""
File system port interface defining the contract for the shell's file operations.
"""

from abc import ABC, abstractmethod

from shell_project.entities.directory_entry import DirectoryEntry
from shell_project.entities.outcome import OperationOutcome


class FileSystemPort(ABC):
    """
    Port interface for file system operations.

    Implementations never raise for filesystem failures: every call returns an
    OperationOutcome the caller must inspect.
    """

    @abstractmethod
    def list_dir(
        self, path: str, include_hidden: bool = False, details: bool = False
    ) -> OperationOutcome[list[DirectoryEntry]]:
        """
        List the entries of a directory sorted by name.

        Args:
            path: Directory to list
            include_hidden: Include names starting with "." (and "." / "..")
            details: Fill mode, size and modification time of each entry

        Returns:
            Outcome carrying the entries, or NOT_FOUND / PERMISSION_DENIED
        """
        pass

    @abstractmethod
    def read_all(self, path: str) -> OperationOutcome[bytes]:
        """
        Read a whole file for display, dropping one trailing line feed.

        Args:
            path: File to read

        Returns:
            Outcome carrying the content, or NOT_FOUND / ALLOCATION_FAILURE /
            READ_FAILURE
        """
        pass

    @abstractmethod
    def create_empty(self, path: str) -> OperationOutcome[None]:
        """
        Create a file if absent, leaving an existing file untouched.

        Args:
            path: File to create

        Returns:
            Outcome, OPEN_FAILURE when creation is denied
        """
        pass

    @abstractmethod
    def copy(self, source: str, target: str) -> OperationOutcome[None]:
        """
        Copy the bytes of source into target, creating target if absent.

        Args:
            source: File to copy
            target: Destination file

        Returns:
            Outcome, with the read failures of source or OPEN_FAILURE /
            WRITE_FAILURE for target
        """
        pass

    @abstractmethod
    def create_directory_tree(self, path: str) -> OperationOutcome[None]:
        """
        Create a directory and every missing parent, in order.

        Args:
            path: Directory path to create

        Returns:
            Outcome, OPERATION_FAILED naming the first segment that failed
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> OperationOutcome[None]:
        """
        Delete a single non-directory entry.

        Args:
            path: File to delete

        Returns:
            Outcome, OPERATION_FAILED when deletion fails
        """
        pass

    @abstractmethod
    def remove_directory_recursive(self, path: str) -> OperationOutcome[None]:
        """
        Delete a directory and all of its descendants.

        Stops at the first failing entry; entries deleted before it stay deleted.
        A symbolic link is refused and never followed.

        Args:
            path: Directory to delete

        Returns:
            Outcome of the first failure, or success
        """
        pass

    @abstractmethod
    def is_symlink(self, path: str) -> bool:
        """
        Check whether a path is itself a symbolic link, without following it.

        Args:
            path: Path to inspect

        Returns:
            True for a symbolic link, False otherwise (including missing paths)
        """
        pass

    @abstractmethod
    def move(self, source: str, target: str) -> OperationOutcome[None]:
        """
        Rename source to target, or into target when it is a directory.

        Args:
            source: Entry to move
            target: New name or destination directory

        Returns:
            Outcome, FILE_FAILURE / SAME_FILE / OPERATION_FAILED on failure
        """
        pass

    @abstractmethod
    def change_directory(self, path: str) -> OperationOutcome[None]:
        """
        Change the process working directory.

        Args:
            path: Directory to enter

        Returns:
            Outcome, NOT_FOUND when the directory cannot be entered
        """
        pass

    @abstractmethod
    def current_directory(self) -> OperationOutcome[str]:
        """
        Get the process working directory.

        Returns:
            Outcome carrying the absolute path, NOT_FOUND if it is gone
        """
        pass
