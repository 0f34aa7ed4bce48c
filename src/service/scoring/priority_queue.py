"""
Applicant priority queue for the Loan Triage Engine.

Applicants are processed lowest risk first. The queue is a binary min-heap
keyed on risk_score; ties between equal risk scores carry no ordering
guarantee for callers.
"""

import heapq
import itertools
from typing import Iterable, Iterator, List, Tuple

from src.domain.exceptions import EmptyQueueException

from .models import Applicant


class ApplicantQueue:
    """
    Min-heap of applicants ordered by ascending risk score.

    Not thread-safe: callers sharing a queue must lock around push/pop pairs.
    """

    def __init__(self, applicants: Iterable[Applicant] = ()):
        self._heap: List[Tuple[float, int, Applicant]] = []
        # Sequence number keeps Applicant instances out of heap comparisons
        self._counter = itertools.count()
        self.extend(applicants)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, applicant: Applicant) -> None:
        """Insert an applicant in O(log n)."""
        heapq.heappush(self._heap, (applicant.risk_score, next(self._counter), applicant))

    def extend(self, applicants: Iterable[Applicant]) -> None:
        """Insert every applicant from an iterable."""
        for applicant in applicants:
            self.push(applicant)

    def pop_min(self) -> Applicant:
        """
        Remove and return the applicant with the smallest risk score.

        Raises:
            EmptyQueueException: If the queue has no applicants left
        """
        if not self._heap:
            raise EmptyQueueException()
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Applicant:
        """
        Return the lowest-risk applicant without removing it.

        Raises:
            EmptyQueueException: If the queue has no applicants left
        """
        if not self._heap:
            raise EmptyQueueException()
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def drain(self) -> Iterator[Applicant]:
        """Pop applicants in ascending risk order until the queue is empty."""
        while not self.is_empty():
            yield self.pop_min()
