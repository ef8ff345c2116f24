"""Per-function bookkeeping of names found in JSX."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


class NameSet:
    """Insertion-ordered set of names."""

    def __init__(self) -> None:
        self._names: Dict[str, None] = {}

    def add(self, name: str) -> bool:
        """Add ``name``; return True if it was not present yet."""
        if name in self._names:
            return False
        self._names[name] = None
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"NameSet({list(self._names)!r})"


@dataclass
class ScopeFrame:
    """Names tracked for one open function."""

    is_entry_point: bool = False
    objects: NameSet = field(default_factory=NameSet)
    components: NameSet = field(default_factory=NameSet)
    tags: NameSet = field(default_factory=NameSet)

    def is_empty(self) -> bool:
        return not (self.objects or self.components or self.tags)


class ScopeStack:
    """Stack of frames, one per currently open function.

    Discoveries are recorded on :attr:`root`, the frame of the outermost open
    function, not on the innermost one: only top-level functions are treated
    as components that receive injected declarations.
    """

    def __init__(self) -> None:
        self._frames: List[ScopeFrame] = []
        self.root: Optional[ScopeFrame] = None

    def push(self, frame: ScopeFrame) -> ScopeFrame:
        self._frames.append(frame)
        if self.root is None:
            self.root = frame
        return frame

    def pop(self) -> ScopeFrame:
        frame = self._frames.pop()
        if not self._frames:
            self.root = None
        return frame

    def __len__(self) -> int:
        return len(self._frames)
