"""Push-based result streams with cooperative cancellation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generator, Iterator, List, Optional, Union

from .errors import FluentSQLError
from .result import Result

logger = logging.getLogger(__name__)

OnNext = Callable[[Result], Any]
OnError = Callable[[FluentSQLError], Any]
OnCompleted = Callable[[], Any]
Producer = Callable[[], Generator[Result, None, None]]


class Subscriber:
    """Receiver of results pushed by a `ResultStream`.

    Subclasses override the `on_*` hooks. Calling `cancel()` (typically from
    `on_next`) stops the stream before the next row and before the next
    window; a cancelled subscription never receives `on_completed`.
    """

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def on_next(self, result: Result) -> None:
        pass

    def on_error(self, error: FluentSQLError) -> None:
        raise error

    def on_completed(self) -> None:
        pass


class CallbackSubscriber(Subscriber):
    """Subscriber built from plain callables."""

    def __init__(
        self,
        on_next: Optional[OnNext] = None,
        on_error: Optional[OnError] = None,
        on_completed: Optional[OnCompleted] = None,
    ):
        super().__init__()
        self._on_next = on_next
        self._on_error = on_error
        self._on_completed = on_completed

    def on_next(self, result: Result) -> None:
        if self._on_next is not None:
            self._on_next(result)

    def on_error(self, error: FluentSQLError) -> None:
        if self._on_error is None:
            super().on_error(error)
            return
        self._on_error(error)

    def on_completed(self) -> None:
        if self._on_completed is not None:
            self._on_completed()


class ResultStream:
    """Cold stream of results.

    Each subscription (or iteration) runs the producer from the start, so a
    stream can be consumed any number of times, from several threads at
    once. The producer runs synchronously in the consuming thread.
    """

    def __init__(self, produce: Producer):
        self._produce = produce

    def subscribe(
        self,
        on_next: Union[Subscriber, OnNext, None] = None,
        on_error: Optional[OnError] = None,
        on_completed: Optional[OnCompleted] = None,
    ) -> Subscriber:
        """Push every result to a subscriber and signal one terminal event.

        Args:
            on_next: A `Subscriber`, or a callable receiving each result.
            on_error: Callable receiving the terminal error. Without one the
                error is raised from `subscribe`.
            on_completed: Callable invoked once the stream is exhausted.

        Returns:
            The subscriber that received the stream.
        """

        if isinstance(on_next, Subscriber):
            subscriber = on_next
        else:
            subscriber = CallbackSubscriber(on_next, on_error, on_completed)

        if subscriber.cancelled:
            return subscriber

        rows = self._produce()
        try:
            while True:
                if subscriber.cancelled:
                    logger.debug("subscriber cancelled; stopping stream")
                    return subscriber
                try:
                    result = next(rows)
                except StopIteration:
                    break
                except FluentSQLError as exc:
                    subscriber.on_error(exc)
                    return subscriber
                subscriber.on_next(result)
        finally:
            rows.close()

        subscriber.on_completed()
        return subscriber

    def __iter__(self) -> Iterator[Result]:
        return self._produce()

    def first(self) -> Optional[Result]:
        """Return the first result, or `None` for an empty stream."""

        rows = self._produce()
        try:
            return next(rows, None)
        finally:
            rows.close()

    def to_list(self) -> List[Result]:
        return list(self._produce())
