"""
Single-Value Stream Module

This module provides Single, a cold asynchronous stream that produces exactly
one value or one error per subscription. Every facade operation returns one.

A Single holds a factory instead of a running coroutine, so nothing happens
until it is awaited, iterated or subscribed, and each of those triggers a
fresh call of the factory.
"""

import asyncio
from typing import Any, AsyncIterator, Awaitable, Callable, Generator, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Single(Generic[T]):
    """Cold, single-shot asynchronous stream."""

    def __init__(self, factory: Callable[[], Awaitable[T]]):
        """
        Initialize the stream.

        Args:
            factory: Zero-argument callable returning a fresh awaitable per call
        """
        self._factory = factory

    @classmethod
    def of(cls, value: T) -> "Single[T]":
        """Stream that emits an already known value."""
        async def _value() -> T:
            return value
        return cls(_value)

    @classmethod
    def from_async(cls, func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> "Single[T]":
        """
        Stream that calls an async function with fixed arguments on every subscription.

        Args:
            func: Coroutine function to call
            *args: Positional arguments bound now, used at subscription time
            **kwargs: Keyword arguments bound now, used at subscription time
        """
        return cls(lambda: func(*args, **kwargs))

    async def _run(self) -> T:
        return await self._factory()

    def __await__(self) -> Generator[Any, None, T]:
        return self._run().__await__()

    async def __aiter__(self) -> AsyncIterator[T]:
        yield await self._run()

    def map(self, func: Callable[[T], R]) -> "Single[R]":
        """
        Transform the emitted value.

        An exception raised by func becomes the stream's error.
        """
        async def _mapped() -> R:
            return func(await self._run())
        return Single(_mapped)

    def catch(self, handler: Callable[[Exception], R]) -> "Single[Any]":
        """
        Replace an error with the value returned by handler.

        Cancellation is not an Exception and is never caught here.
        """
        async def _caught():
            try:
                return await self._run()
            except Exception as e:
                return handler(e)
        return Single(_caught)

    def subscribe(
        self,
        on_next: Optional[Callable[[T], Any]] = None,
        on_error: Optional[Callable[[Exception], Any]] = None,
        on_completed: Optional[Callable[[], Any]] = None,
    ) -> "asyncio.Task[None]":
        """
        Start the stream on the running event loop and deliver its terminal event.

        Exactly one of (on_next then on_completed) or on_error is called.
        Cancelling the returned task disposes the subscription: the result is
        no longer delivered, but a remote action already sent is not undone.

        Args:
            on_next: Called with the value
            on_error: Called with the error; when omitted the error stays on the task
            on_completed: Called after on_next

        Returns:
            asyncio.Task: The task driving the subscription.
        """
        async def _deliver() -> None:
            try:
                value = await self._run()
            except Exception as e:
                if on_error is None:
                    raise
                on_error(e)
                return
            if on_next is not None:
                on_next(value)
            if on_completed is not None:
                on_completed()

        return asyncio.get_running_loop().create_task(_deliver())
