"""Puzzles on folder paths."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


def _ancestors(folder: str) -> Iterator[str]:
    """Yield every proper ancestor of ``folder``, nearest first, ending with ``""``."""
    path = folder
    while path:
        path = path.rpartition("/")[0]
        yield path


def remove_subfolders(folders: Sequence[str]) -> list[str]:
    """Return the folders that do not lie inside another listed folder.

    Every folder must start with ``/``. The input order is kept.
    """
    for folder in folders:
        if not folder.startswith("/"):
            raise ValueError(f"folder must start with '/': {folder!r}")
    present = set(folders)
    return [
        folder
        for folder in folders
        if not any(parent in present for parent in _ancestors(folder))
    ]


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    marked: bool = False


def _build_tree(paths: Sequence[Sequence[str]]) -> _Node:
    root = _Node()
    for path in paths:
        node = root
        for name in path:
            node = node.children.setdefault(name, _Node())
    return root


def _mark_duplicates(node: _Node, seen: dict[str, _Node]) -> str:
    """Serialise the structure below ``node`` and mark nodes sharing a structure."""
    if not node.children:
        return ""
    signature = "".join(
        f"({name}{_mark_duplicates(child, seen)})"
        for name, child in sorted(node.children.items())
    )
    first = seen.get(signature)
    if first is None:
        seen[signature] = node
    else:
        first.marked = True
        node.marked = True
    return signature


def _surviving_paths(node: _Node, prefix: list[str]) -> Iterator[list[str]]:
    for name, child in sorted(node.children.items()):
        if child.marked:
            continue
        path = [*prefix, name]
        yield path
        yield from _surviving_paths(child, path)


def delete_duplicate_folders(paths: Sequence[Sequence[str]]) -> list[list[str]]:
    """Delete every folder whose non-empty subfolder structure occurs more than once.

    The remaining folders are returned as paths, in depth-first order with
    siblings sorted by name.
    """
    root = _build_tree(paths)
    _mark_duplicates(root, {})
    return list(_surviving_paths(root, []))