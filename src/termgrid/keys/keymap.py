"""Key maps: tries from raw key sequences to application events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar, Union

from termgrid.keys.input import Key


T = TypeVar("T")

KeySpec = Union[str, Key]


@dataclass
class Action(Generic[T]):
    """
    An application event and the keys that produce it.

    Attributes:
        keys: Raw sequences (``"q"``, ``ctrl("c")``, ``"\\x1b[A"``) or named
            Keys, which expand to every sequence terminals send for them
        event: Value published when one of the keys is read; must not be None
    """
    keys: list[KeySpec]
    event: T


@dataclass
class _Node(Generic[T]):
    children: dict[str, "_Node[T]"] = field(default_factory=dict)
    value: Optional[T] = None


def expand(keys: Iterable[KeySpec]) -> Iterator[str]:
    """Expand a mix of raw sequences and named Keys into raw sequences."""
    for key in keys:
        if isinstance(key, Key):
            yield from key.sequences
        elif isinstance(key, str) and key:
            yield key
        else:
            raise ValueError(f"Key must be a non-empty string or a Key, got {key!r}")


class KeyMap(Generic[T]):
    """
    Trie of raw key sequences, one character per edge.

    A node may hold a value and also have children; that is an ambiguous
    binding (Escape alone versus an arrow key) which the BindingReader
    resolves by waiting briefly for more input.

    Example:
        keymap = KeyMap()
        keymap.bind("quit", "q", ctrl("c"))
        keymap.bind("up", Key.UP, "k")
    """

    def __init__(self) -> None:
        self.root: _Node[T] = _Node()
        self._size = 0

    @classmethod
    def from_actions(cls, actions: Iterable[Action[T]]) -> "KeyMap[T]":
        """Build a key map binding every action's keys to its event."""
        keymap: KeyMap[T] = cls()
        for action in actions:
            keymap.bind(action.event, *action.keys)
        return keymap

    def bind(self, value: T, *keys: KeySpec) -> None:
        """Bind ``value`` to each of ``keys``, replacing earlier bindings."""
        if value is None:
            raise ValueError("Cannot bind None")
        if not keys:
            raise ValueError("bind() needs at least one key")
        for sequence in list(expand(keys)):
            node = self.root
            for char in sequence:
                node = node.children.setdefault(char, _Node())
            if node.value is None:
                self._size += 1
            node.value = value

    def unbind(self, *keys: KeySpec) -> None:
        """Remove bindings for ``keys``. Unknown keys are ignored."""
        for sequence in list(expand(keys)):
            path = [self.root]
            for char in sequence:
                child = path[-1].children.get(char)
                if child is None:
                    break
                path.append(child)
            else:
                node = path[-1]
                if node.value is None:
                    continue
                node.value = None
                self._size -= 1
                # Prune branches that no longer lead to a binding
                for parent, char in zip(reversed(path[:-1]), reversed(sequence)):
                    child = parent.children[char]
                    if child.value is not None or child.children:
                        break
                    del parent.children[char]

    def get(self, sequence: str) -> Optional[T]:
        """Value bound to exactly ``sequence``, or None."""
        node = self.root
        for char in sequence:
            node = node.children.get(char)
            if node is None:
                return None
        return node.value

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Key):
            return any(self.get(seq) is not None for seq in key.sequences)
        if isinstance(key, str):
            return self.get(key) is not None
        return False

    def __len__(self) -> int:
        return self._size

    def bindings(self) -> Iterator[tuple[str, T]]:
        """Iterate over (sequence, value) pairs in sequence order."""
        stack: list[tuple[str, _Node[T]]] = [("", self.root)]
        while stack:
            prefix, node = stack.pop()
            if node.value is not None:
                yield prefix, node.value
            for char in sorted(node.children, reverse=True):
                stack.append((prefix + char, node.children[char]))
