"""Zip N sequences out to the length of the longest, filling in defaults for the short ones."""

from collections import deque
from collections.abc import Sequence
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from longzip.base.defaults import (
    DefaultFactory,
    constant_factory,
    default_factory_for,
    infer_element_type,
)

ValueType = TypeVar("ValueType")

# Marks "no value given" for options where None is a perfectly good value.
_UNSET: Any = object()


class ZipSource(Generic[ValueType]):
    def __init__(
        self,
        source: Iterable[ValueType],
        name: Optional[str] = None,
        default: Any = _UNSET,
        default_factory: Optional[Callable[[], Any]] = None,
        element_type: Optional[type] = None,
    ) -> None:
        """A wrapper around an `Iterable` to give per-source options to `zip_longest`.

        Args:
            source: The underlying iterable.
            name: An optional label for this source, used to generate nicer error messages.
            default: If given, yield this value for this source once it's been exhausted.
            default_factory: If given, call this (with no arguments) to make a fresh value for
                each step after this source has been exhausted. Use this for mutable defaults.
            element_type: If given, yield ``element_type()`` once this source is exhausted,
                rather than guessing the type from the source's contents.

        Only one of `default`, `default_factory`, and `element_type` may be given. If none of
        them is, the fill value is the view-wide ``fillvalue`` if one was passed, or else the
        default value of the source's inferred element type.
        """
        self.source = source
        self.name = name
        self.default = default
        self.default_factory = default_factory
        self.element_type = element_type


class _Slot(object):
    """One bound sequence: its contents, its end marker, and how to fill in for it."""

    def __init__(self, source: Union[ZipSource, Iterable], fillvalue: Any) -> None:
        if not isinstance(source, ZipSource):
            source = ZipSource(source)
        if (
            (1 if source.default is not _UNSET else 0)
            + (1 if source.default_factory is not None else 0)
            + (1 if source.element_type is not None else 0)
        ) > 1:
            raise AssertionError(
                "No more than one of default, default_factory, and element_type may be given "
                "per source"
            )

        self.name = source.name
        self.sequence = self._bind(source.source)
        self.end = len(self.sequence)
        self.default = self._default_factory(source, fillvalue)

    def at(self, position: int) -> Any:
        assert 0 <= position <= self.end
        return self.sequence[position] if position < self.end else self.default()

    @staticmethod
    def _bind(source: Iterable) -> Sequence:
        # Real sequences we borrow as-is. Everything else (including things that merely have
        # __getitem__, which may be keyed) might only be good for a single pass, so we take a
        # copy. Deques are sequences, but indexing into their middle is O(n).
        if isinstance(source, Sequence) and not isinstance(source, deque):
            return source  # type: ignore
        return tuple(source)

    def _default_factory(self, source: ZipSource, fillvalue: Any) -> DefaultFactory:
        if source.default_factory is not None:
            return source.default_factory
        if source.default is not _UNSET:
            return constant_factory(source.default)
        if source.element_type is not None:
            return default_factory_for(source.element_type, self.name)
        if fillvalue is not _UNSET:
            return constant_factory(fillvalue)
        return default_factory_for(infer_element_type(self.sequence), self.name)


class ZipLongestCursor(Iterator[Tuple[Any, ...]]):
    """A forward cursor over a group of sequences, which steps through all of them together.

    Each step moves every sequence that still has elements left forward by one, and leaves the
    exhausted ones where they are, at their ends. So no matter how many times you advance, no
    sequence is ever read past its end; once every sequence is exhausted, the cursor is equal to
    the view's ``end()`` and further advances do nothing.

    ``cursor.value`` is the current step's tuple, with the current element of each active
    sequence and a default value for each exhausted one. It's built once per step, so reading it
    repeatedly hands back the very same tuple.

    Cursors are cheap, and each one owns its own positions: copies can be advanced independently
    of one another (even from different threads, so long as nobody mutates the sequences).

    You can also use a cursor as an ordinary Python iterator; ``next()`` returns the current
    value and then advances.
    """

    def __init__(
        self,
        slots: Tuple[_Slot, ...],
        positions: List[int],
        value: Optional[Tuple[Any, ...]] = None,
    ) -> None:
        self._slots = slots
        self._positions = positions
        self._value = value if value is not None else self._aggregate(positions)

    @property
    def value(self) -> Tuple[Any, ...]:
        """The tuple for the current step.

        Raises:
            IndexError if the cursor is at the end, where there is nothing to read.
        """
        if self._value is None:
            raise IndexError("Cannot dereference a ZipLongestCursor which is at its end")
        return self._value

    def dereference(self) -> Tuple[Any, ...]:
        return self.value

    def advance(self) -> "ZipLongestCursor":
        """Step every sequence which isn't yet exhausted forward by one.

        Advancing a cursor that's already at its end is a no-op. Returns the cursor itself.
        """
        positions = [
            position + 1 if position < slot.end else position
            for slot, position in zip(self._slots, self._positions)
        ]
        value = self._aggregate(positions)
        self._positions, self._value = positions, value
        return self

    def advance_copy(self) -> "ZipLongestCursor":
        """Like ``cursor++``: advance this cursor, and return a copy of how it was before."""
        previous = self.copy()
        self.advance()
        return previous

    def copy(self) -> "ZipLongestCursor":
        return ZipLongestCursor(self._slots, list(self._positions), self._value)

    __copy__ = copy

    def equals(self, other: "ZipLongestCursor") -> bool:
        """Two cursors are equal if they're over the same sequences and at the same positions."""
        return (
            len(self._slots) == len(other._slots)
            and all(
                mine.sequence is theirs.sequence
                for mine, theirs in zip(self._slots, other._slots)
            )
            and self._positions == other._positions
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZipLongestCursor):
            return NotImplemented
        return self.equals(other)

    @property
    def at_end(self) -> bool:
        """True once every sequence is exhausted."""
        return self._value is None

    def exhausted(self, slot: int) -> bool:
        """Has the sequence in the given slot run out?"""
        return self._positions[slot] == self._slots[slot].end

    @property
    def index(self) -> int:
        """How many steps this cursor has taken (not counting no-op advances at the end)."""
        return max(self._positions, default=0)

    def __iter__(self) -> "ZipLongestCursor":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        if self._value is None:
            raise StopIteration
        value = self._value
        self.advance()
        return value

    def __repr__(self) -> str:
        return f"ZipLongestCursor(positions={self._positions})"

    def _aggregate(self, positions: List[int]) -> Optional[Tuple[Any, ...]]:
        if all(position == slot.end for slot, position in zip(self._slots, positions)):
            return None
        return tuple(slot.at(position) for slot, position in zip(self._slots, positions))


class ZipLongestView(Iterable[Tuple[Any, ...]]):
    def __init__(
        self, *sources: Union[ZipSource, Iterable], fillvalue: Any = _UNSET
    ) -> None:
        """A group of N sequences, which can be walked together out to the longest one.

        The view borrows any source that is a ``collections.abc.Sequence`` (other than a deque),
        so you must keep those alive and unmodified for as long as you use the view. Every other
        iterable (generators, deques, key-indexed containers and so on) is read into a tuple right
        away.

        The length of the view is fixed here, at construction.

        Args:
            sources: The sequences to zip, each optionally wrapped in a `ZipSource`.
            fillvalue: If given, the value to fill in for exhausted sources that don't have their
                own default set in a `ZipSource`.

        Raises:
            TypeError if some source's element type has no default value.
            AssertionError if invalid options were passed for any source.
        """
        self._slots = tuple(_Slot(source, fillvalue) for source in sources)
        self._length = max((slot.end for slot in self._slots), default=0)

    def begin(self) -> ZipLongestCursor:
        """A cursor at the start of every sequence."""
        return ZipLongestCursor(self._slots, [0] * len(self._slots))

    def end(self) -> ZipLongestCursor:
        """A cursor at the end of every sequence. Compare against it, but don't read from it."""
        return ZipLongestCursor(self._slots, [slot.end for slot in self._slots])

    def size(self) -> int:
        return self._length

    def empty(self) -> bool:
        return self._length == 0

    @property
    def width(self) -> int:
        """The number of sequences in the group; the length of each yielded tuple."""
        return len(self._slots)

    @property
    def names(self) -> Tuple[Optional[str], ...]:
        return tuple(slot.name for slot in self._slots)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return not self.empty()

    def __iter__(self) -> ZipLongestCursor:
        return self.begin()

    def __repr__(self) -> str:
        return f"ZipLongestView(width={self.width}, length={self._length})"


def zip_longest(
    *sources: Union[ZipSource, Iterable], fillvalue: Any = _UNSET
) -> ZipLongestView:
    """Zip N sequences together, running until the longest one is exhausted.

    Unlike the builtin ``zip``, which stops at the shortest input, this keeps going until every
    input has run out. Once a sequence is exhausted it's never read again; its place in each
    tuple is taken by a default value instead. By default that's the "empty" value of the
    sequence's element type (``0`` for ints, ``0.0`` for floats, ``""`` for strings), so each
    position of the tuple keeps a consistent type throughout.

    Args:
        sources: The N sequences to zip. Each can be a plain iterable, or be wrapped in a
            `ZipSource` to give it a name or its own fill value.
        fillvalue: If given, use this for every exhausted source that doesn't set its own
            default, instead of inferring one from the element type.

    Returns:
        A `ZipLongestView`, which you can loop over as often as you like, ask for its ``len()``,
        or walk by hand with its ``begin()`` and ``end()`` cursors.

    Raises:
        TypeError if some source's element type has no default value. In that case, give it
            one explicitly with ``ZipSource(..., default=...)`` or pass ``fillvalue``.
        AssertionError if invalid options were passed for any source.

    Example
    =======

    ::

        a = [1.2, 2.3, 3.4, 4.5]
        b = [1, 2, 3, 4, 5]
        c = ["a", "b", "c"]

    Then ``zip_longest(a, b, c)`` will yield::

        (1.2, 1, "a")
        (2.3, 2, "b")
        (3.4, 3, "c")
        (4.5, 4, "")
        (0.0, 5, "")

    while ``zip_longest(a, ZipSource(b, default=-1), c, fillvalue=None)`` would end with
    ``(4.5, 4, None)`` and ``(None, 5, None)``; b never runs out, so its default is never used.
    """
    return ZipLongestView(*sources, fillvalue=fillvalue)
