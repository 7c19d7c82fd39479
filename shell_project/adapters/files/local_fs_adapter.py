"""
Local file system adapter implementation for the shell's file operations.
"""

import logging
import os
import stat
from typing import Optional

from typing_extensions import override

from shell_project.adapters.files.stat_path_identity import StatPathIdentity
from shell_project.entities.directory_entry import DirectoryEntry
from shell_project.entities.outcome import ErrorKind, OperationOutcome
from shell_project.ports.files.file_system_port import FileSystemPort
from shell_project.ports.files.path_identity_port import PathIdentityPort

# Owner read/write, group/other read (before umask)
FILE_MODE = 0o644


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(
        self,
        path_identity: Optional[PathIdentityPort] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            path_identity: Comparator used to detect moves onto the same file.
                Defaults to a stat based comparator.
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._identity: PathIdentityPort = path_identity or StatPathIdentity(
            self._logger
        )

    def _failure(
        self, kind: ErrorKind, path: str, error: Optional[BaseException] = None
    ) -> OperationOutcome:
        """
        Build a failed outcome and log it.

        Args:
            kind: Error kind to report
            path: Path the operation failed on
            error: Underlying exception, if any

        Returns:
            The failed OperationOutcome
        """
        reason = getattr(error, "strerror", None) or (str(error) if error else "")
        detail = f"{path}: {reason}" if reason else path
        self._logger.warning(f"{kind.value}: {detail}")
        return OperationOutcome.failure(kind, detail)

    def _entry(self, directory: str, name: str, details: bool) -> DirectoryEntry:
        if not details:
            return DirectoryEntry(name)
        try:
            st = os.lstat(os.path.join(directory, name))
        except OSError as e:
            # Entry vanished between listing and stat; keep the name only
            self._logger.debug(f"Could not stat {name} in {directory}: {e}")
            return DirectoryEntry(name)
        return DirectoryEntry(
            name, mode=st.st_mode, size=st.st_size, modified=st.st_mtime
        )

    def _read_bytes(self, path: str) -> OperationOutcome[bytes]:
        """
        Read the exact bytes of a file.

        Args:
            path: File to read

        Returns:
            Outcome carrying the bytes
        """
        try:
            f = open(path, "rb")
        except OSError as e:
            return self._failure(ErrorKind.NOT_FOUND, path, e)

        with f:
            try:
                size = os.fstat(f.fileno()).st_size
                buffer = bytearray(size)
            except MemoryError as e:
                return self._failure(ErrorKind.ALLOCATION_FAILURE, path, e)
            except OSError as e:
                return self._failure(ErrorKind.READ_FAILURE, path, e)

            got = 0
            try:
                view = memoryview(buffer)
                while got < size:
                    n = f.readinto(view[got:])
                    if not n:
                        break
                    got += n
                view.release()
                # Files reporting size 0 (or growing meanwhile) are read to EOF
                rest = f.read() if got == size else b""
            except MemoryError as e:
                return self._failure(ErrorKind.ALLOCATION_FAILURE, path, e)
            except OSError as e:
                return self._failure(ErrorKind.READ_FAILURE, path, e)

        if got < size:
            return self._failure(
                ErrorKind.READ_FAILURE,
                path,
                EOFError(f"read {got} of {size} bytes"),
            )
        return OperationOutcome.success(bytes(buffer) + rest)

    @override
    def list_dir(
        self, path: str, include_hidden: bool = False, details: bool = False
    ) -> OperationOutcome[list[DirectoryEntry]]:
        try:
            names = os.listdir(path)
        except PermissionError as e:
            return self._failure(ErrorKind.PERMISSION_DENIED, path, e)
        except OSError as e:
            return self._failure(ErrorKind.NOT_FOUND, path, e)

        if include_hidden:
            names = [".", ".."] + names
        else:
            names = [n for n in names if not n.startswith(".")]

        entries = [self._entry(path, n, details) for n in names]
        entries.sort(key=lambda e: e.sort_key)
        return OperationOutcome.success(entries)

    @override
    def read_all(self, path: str) -> OperationOutcome[bytes]:
        outcome = self._read_bytes(path)
        if not outcome.ok:
            return outcome
        content = outcome.value or b""
        if content.endswith(b"\n"):
            content = content[:-1]
        return OperationOutcome.success(content)

    @override
    def create_empty(self, path: str) -> OperationOutcome[None]:
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT, FILE_MODE)
        except OSError as e:
            return self._failure(ErrorKind.OPEN_FAILURE, path, e)
        os.close(fd)
        self._logger.info(f"Touched file: {path}")
        return OperationOutcome.success()

    @override
    def copy(self, source: str, target: str) -> OperationOutcome[None]:
        read = self._read_bytes(source)
        if not read.ok:
            return OperationOutcome.failure(read.error, read.detail)
        data = read.value or b""

        try:
            fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        except OSError as e:
            return self._failure(ErrorKind.OPEN_FAILURE, target, e)

        written = 0
        error: Optional[BaseException] = None
        try:
            view = memoryview(data)
            while written < len(data):
                n = os.write(fd, view[written:])
                if n <= 0:
                    break
                written += n
        except OSError as e:
            error = e
        finally:
            os.close(fd)

        if written != len(data):
            return self._failure(
                ErrorKind.WRITE_FAILURE,
                target,
                error or IOError(f"wrote {written} of {len(data)} bytes"),
            )
        self._logger.info(f"Copied {len(data)} bytes: {source} -> {target}")
        return OperationOutcome.success()

    @override
    def create_directory_tree(self, path: str) -> OperationOutcome[None]:
        segments = [s for s in path.split("/") if s]
        if not segments:
            return self._failure(
                ErrorKind.OPERATION_FAILED, path, FileExistsError("File exists")
            )

        current = "/" if path.startswith("/") else ""
        for index, segment in enumerate(segments):
            current = os.path.join(current, segment) if current else segment
            is_last = index == len(segments) - 1
            try:
                os.mkdir(current)
            except FileExistsError as e:
                if is_last or not os.path.isdir(current):
                    return self._failure(ErrorKind.OPERATION_FAILED, current, e)
            except OSError as e:
                return self._failure(ErrorKind.OPERATION_FAILED, current, e)

        self._logger.info(f"Created directory tree: {path}")
        return OperationOutcome.success()

    @override
    def remove_file(self, path: str) -> OperationOutcome[None]:
        try:
            os.remove(path)
        except OSError as e:
            return self._failure(ErrorKind.OPERATION_FAILED, path, e)
        self._logger.info(f"Removed file: {path}")
        return OperationOutcome.success()

    @override
    def is_symlink(self, path: str) -> bool:
        # A trailing slash would make lstat follow the link
        return os.path.islink(path.rstrip(os.sep) or path)

    @override
    def remove_directory_recursive(self, path: str) -> OperationOutcome[None]:
        if os.path.basename(os.path.normpath(path)) in (".", ".."):
            return self._failure(
                ErrorKind.OPERATION_FAILED,
                path,
                ValueError("refusing to remove '.' or '..'"),
            )
        if self.is_symlink(path):
            return self._failure(
                ErrorKind.OPERATION_FAILED,
                path,
                NotADirectoryError("is a symbolic link, not a directory"),
            )

        # The listing is a snapshot taken before anything is deleted
        listing = self.list_dir(path, include_hidden=True)
        if not listing.ok:
            return OperationOutcome.failure(listing.error, listing.detail)
        children = [e.name for e in listing.value or [] if e.name not in (".", "..")]

        for name in children:
            child = os.path.join(path, name)
            try:
                mode = os.lstat(child).st_mode
            except OSError as e:
                return self._failure(ErrorKind.OPERATION_FAILED, child, e)
            if stat.S_ISDIR(mode):
                outcome = self.remove_directory_recursive(child)
            else:
                outcome = self.remove_file(child)
            if not outcome.ok:
                return outcome

        try:
            os.rmdir(path)
        except OSError as e:
            return self._failure(ErrorKind.OPERATION_FAILED, path, e)
        self._logger.info(f"Removed directory: {path}")
        return OperationOutcome.success()

    @override
    def move(self, source: str, target: str) -> OperationOutcome[None]:
        if not os.path.lexists(source):
            return self._failure(
                ErrorKind.FILE_FAILURE, source, FileNotFoundError("No such file or directory")
            )

        destination = target
        if os.path.exists(target):
            if self._identity.same_file(source, target):
                return self._failure(
                    ErrorKind.SAME_FILE, target, ValueError("same file as source")
                )
            if os.path.isdir(target):
                destination = os.path.join(
                    target, os.path.basename(source.rstrip("/"))
                )
                if self._identity.same_file(source, destination):
                    return self._failure(
                        ErrorKind.SAME_FILE,
                        destination,
                        ValueError("same file as source"),
                    )

        try:
            os.rename(source, destination)
        except OSError as e:
            return self._failure(ErrorKind.OPERATION_FAILED, destination, e)
        self._logger.info(f"Moved {source} -> {destination}")
        return OperationOutcome.success()

    @override
    def change_directory(self, path: str) -> OperationOutcome[None]:
        try:
            os.chdir(path)
        except OSError as e:
            return self._failure(ErrorKind.NOT_FOUND, path, e)
        self._logger.debug(f"Changed directory: {path}")
        return OperationOutcome.success()

    @override
    def current_directory(self) -> OperationOutcome[str]:
        try:
            return OperationOutcome.success(os.getcwd())
        except OSError as e:
            return self._failure(ErrorKind.NOT_FOUND, ".", e)
