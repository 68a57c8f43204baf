"""Snapshot-based undo/redo."""

from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class History(Generic[T]):
    """Linear undo/redo history of whole-document snapshots.

    ``past`` is ordered oldest first, ``future`` nearest first. Every method
    returns a new History; the receiver is never modified.

    Attributes
    ----------
    past : tuple
        Earlier snapshots, oldest first
    present : T
        The current snapshot
    future : tuple
        Undone snapshots, the next one to redo first
    limit : int or None
        Maximum number of past snapshots kept, unbounded if None
    """

    present: T
    past: Tuple[T, ...] = ()
    future: Tuple[T, ...] = ()
    limit: Optional[int] = None

    @classmethod
    def fresh(cls, present: T, limit: Optional[int] = None) -> "History[T]":
        return cls(present, limit=limit)

    def push(self, snapshot: T) -> "History[T]":
        """Record a completed edit: the current present moves to the past.

        The future is discarded. Call this once per user intent; use
        ``replace_present`` for edits still in progress.
        """
        past = self.past + (self.present,)
        if self.limit is not None and len(past) > self.limit:
            past = past[len(past) - self.limit :]
        return History(snapshot, past, (), self.limit)

    def replace_present(self, snapshot: T) -> "History[T]":
        """Swap the present without recording a snapshot."""
        return History(snapshot, self.past, self.future, self.limit)

    def undo(self) -> "History[T]":
        if not self.past:
            return self
        return History(self.past[-1], self.past[:-1], (self.present,) + self.future, self.limit)

    def redo(self) -> "History[T]":
        if not self.future:
            return self
        return History(self.future[0], self.past + (self.present,), self.future[1:], self.limit)

    def has_past(self) -> bool:
        return bool(self.past)

    def has_future(self) -> bool:
        return bool(self.future)

    def clear(self) -> "History[T]":
        """Forget every snapshot except the present."""
        return History(self.present, limit=self.limit)
