"""An in-memory tree of directories and empty files with a working directory."""

from __future__ import annotations

from dataclasses import dataclass, field


class FileSystemError(Exception):
    """Raised when a file system operation cannot be carried out."""


@dataclass(eq=False)
class FileNode:
    """A file or directory in the tree."""

    name: str
    is_dir: bool
    parent: FileNode | None = field(default=None, repr=False)
    children: list[FileNode] = field(default_factory=list, repr=False)


class FileSystem:
    """A directory tree rooted at "/" with a current directory."""

    def __init__(self) -> None:
        self.root = FileNode("/", is_dir=True)
        self.current = self.root

    @property
    def at_root(self) -> bool:
        """Whether the current directory is the root."""
        return self.current is self.root

    @property
    def path(self) -> str:
        """The absolute path of the current directory."""
        names = []
        node = self.current
        while node is not self.root and node is not None:
            names.append(node.name)
            node = node.parent
        return "/" + "/".join(reversed(names))

    def _find(self, directory: FileNode, name: str, is_dir: bool) -> FileNode | None:
        return next(
            (child for child in directory.children if child.name == name and child.is_dir == is_dir),
            None,
        )

    def _add(self, name: str, is_dir: bool) -> FileNode:
        if self._find(self.current, name, is_dir) is not None:
            kind = "directory" if is_dir else "file"
            raise FileSystemError(f"{kind} already exists: {name}")
        node = FileNode(name, is_dir=is_dir, parent=self.current)
        self.current.children.append(node)
        return node

    def _remove(self, name: str, is_dir: bool) -> None:
        node = self._find(self.current, name, is_dir)
        if node is None:
            kind = "directory" if is_dir else "file"
            raise FileSystemError(f"no such {kind}: {name}")
        self.current.children.remove(node)
        node.parent = None

    def mkdir(self, name: str) -> FileNode:
        """Create a directory in the current directory."""
        return self._add(name, is_dir=True)

    def create(self, name: str) -> FileNode:
        """Create an empty file in the current directory."""
        return self._add(name, is_dir=False)

    def delete(self, name: str) -> None:
        """Remove a file from the current directory."""
        self._remove(name, is_dir=False)

    def remove_dir(self, name: str) -> None:
        """Remove a directory, with everything below it, from the current directory."""
        self._remove(name, is_dir=True)

    def _enter(self, directory: FileNode, name: str, target: str) -> FileNode:
        if not name:
            raise FileSystemError(f"invalid path: {target}")
        found = self._find(directory, name, is_dir=True)
        if found is not None:
            return found
        if self._find(directory, name, is_dir=False) is not None:
            raise FileSystemError(f"not a directory: {name}")
        raise FileSystemError(f"no such directory: {target}")

    def cd(self, target: str) -> None:
        """Change the current directory; on failure it is left unchanged."""
        if target == ".":
            return
        if target == "..":
            if self.current.parent is not None:
                self.current = self.current.parent
            return
        if target == "/":
            self.current = self.root
            return
        if target.startswith("/"):
            node, relative = self.root, target[1:]
        else:
            node, relative = self.current, target
        for part in relative.split("/"):
            node = self._enter(node, part, target)
        self.current = node

    def list_dir(self) -> list[FileNode]:
        """Return the entries of the current directory in creation order."""
        return list(self.current.children)