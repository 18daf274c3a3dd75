import collections.abc
import typing

from .. import logger


type NextFunction[T] = typing.Callable[[T], typing.Any]
type ErrorFunction = typing.Callable[[BaseException], typing.Any]
type CompleteFunction = typing.Callable[[], typing.Any]
type Teardown = typing.Callable[[], typing.Any]
type Strategy[T] = typing.Callable[[Observer[T]], Teardown | None]


class EventHandlers[T](typing.TypedDict, total=False):
    """
    any subset of handlers may be given,
    missing or None handlers are skipped
    """

    next: NextFunction[T] | None
    error: ErrorFunction | None
    complete: CompleteFunction | None


class Observer[T]:
    """
    Per-subscription dispatcher.

    Active until the first `error`, `complete` or `unsubscribe`,
    after that no event reaches the handlers anymore.
    """

    def __init__(
        self,
        handlers: EventHandlers[T],
    ):
        self._handlers = handlers
        self._terminated = False
        self._teardown: Teardown | None = None

    @property
    def terminated(self) -> bool:
        return self._terminated

    def next(
        self,
        value: T,
    ) -> None:
        if self._terminated:
            return
        handler = self._handlers.get('next')
        if callable(handler):
            handler(value)

    def error(
        self,
        e: BaseException,
    ) -> None:
        if self._terminated:
            return
        handler = self._handlers.get('error')
        if callable(handler):
            handler(e)
        self.unsubscribe()

    def complete(self) -> None:
        if self._terminated:
            return
        handler = self._handlers.get('complete')
        if callable(handler):
            handler()
        self.unsubscribe()

    def attach(
        self,
        teardown: Teardown | None,
    ) -> None:
        self._teardown = teardown

    def unsubscribe(self) -> None:
        """
        Runs the teardown on every call, not only on the first one.
        """
        self._terminated = True
        if callable(self._teardown):
            self._teardown()


class Subscription:

    def __init__(
        self,
        observer: Observer,
    ):
        self._observer = observer

    @property
    def closed(self) -> bool:
        return self._observer.terminated

    def unsubscribe(self) -> None:
        self._observer.unsubscribe()


class Observable[T]:
    """
    Cold producer: the strategy runs once for every subscription.
    """

    def __init__(
        self,
        strategy: Strategy[T],
    ):
        self._strategy = strategy

    @classmethod
    def from_iterable(
        cls,
        values: typing.Iterable[T],
    ) -> 'Observable[T]':
        # one-shot iterators would be empty for the second subscriber
        if isinstance(values, collections.abc.Iterator):
            values = tuple(values)

        def strategy(observer: Observer[T]) -> Teardown:
            for value in values:
                if observer.terminated:
                    break
                observer.next(value)

            observer.complete()

            def teardown():
                logger.debug('unsubscribed')

            return teardown

        return cls(strategy)

    from_ = from_iterable

    def observe(
        self,
        handlers: EventHandlers[T] | None = None,
        /,
        next: NextFunction[T] | None = None,
        error: ErrorFunction | None = None,
        complete: CompleteFunction | None = None,
    ) -> tuple[Observer[T], Subscription]:
        """
        Creates an observer, runs the strategy with it and attaches
        the returned teardown. Keyword handlers override the mapping.

        A teardown is attached only after the strategy returns,
        so a synchronous `complete` or `error` inside the strategy
        terminates the observer without running it.
        """
        handler_set: EventHandlers[T] = {**(handlers or {})}
        if next is not None:
            handler_set['next'] = next
        if error is not None:
            handler_set['error'] = error
        if complete is not None:
            handler_set['complete'] = complete

        observer = Observer(handler_set)
        teardown = self._strategy(observer)
        observer.attach(teardown)
        return observer, Subscription(observer)

    def subscribe(
        self,
        handlers: EventHandlers[T] | None = None,
        /,
        next: NextFunction[T] | None = None,
        error: ErrorFunction | None = None,
        complete: CompleteFunction | None = None,
    ) -> Subscription:
        _, subscription = self.observe(
            handlers,
            next=next,
            error=error,
            complete=complete,
        )
        return subscription
