"""
Allocation and reuse of solution-internal storage across generations.

A buffer hands out values with ``allocate``/``clone`` and takes them back with
``deallocate``. Whoever holds an allocated value is its only owner until it is
returned; after ``deallocate`` the caller must not touch the value again.
"""

from __future__ import annotations

import copy
import logging
import weakref
from abc import ABC, abstractmethod
from functools import partial
from typing import Callable, Generic, TypeVar

import numpy as np

from moecore.foundation.exceptions import InvalidConfigurationError, PoolMisuseError

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class MemoryTypedBuffer(ABC, Generic[T]):
    """Allocation interface threaded through Solution.crossover/mutate."""

    @abstractmethod
    def allocate(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def deallocate(self, free: T) -> None:
        raise NotImplementedError

    @abstractmethod
    def clone(self, source: T) -> T:
        raise NotImplementedError

    def owns(self, value: T) -> bool:
        """Whether ``value`` may be handed back to ``deallocate`` right now."""
        return True


class SimpleNonbufferedAllocator(MemoryTypedBuffer[T]):
    """Allocator without reuse: fresh value per call, deep copies for clones."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory

    def allocate(self) -> T:
        return self._factory()

    def deallocate(self, free: T) -> None:
        return None

    def clone(self, source: T) -> T:
        return copy.deepcopy(source)


class FixedSizeVectorsBuffer(MemoryTypedBuffer[np.ndarray]):
    """
    Free list of same-length 1-D arrays.

    ``allocate`` pops the most recently returned array, so a ``deallocate(v)``
    followed directly by ``allocate()`` hands back ``v`` itself. Arrays are
    zero-filled only when they are freshly constructed; recycled arrays keep
    whatever their previous owner left in them.

    The pool keeps a weak ledger of the arrays it has handed out. Returning
    anything else (foreign arrays, double frees, wrong shape or dtype) raises
    PoolMisuseError.

    Not safe for concurrent use: give every worker its own pool.
    """

    def __init__(
        self,
        fixed_vector_size: int,
        init_buffer_size: int = 0,
        dtype: np.dtype | type = np.float64,
    ) -> None:
        if fixed_vector_size <= 0:
            raise InvalidConfigurationError(
                f"fixed_vector_size must be positive, got {fixed_vector_size}.",
                fixed_vector_size=fixed_vector_size,
            )
        if init_buffer_size < 0:
            raise InvalidConfigurationError(
                f"init_buffer_size must be >= 0, got {init_buffer_size}.",
                init_buffer_size=init_buffer_size,
            )
        self.fixed_vector_size = int(fixed_vector_size)
        self.dtype = np.dtype(dtype)
        self._allocated_total = 0
        self._buffer: list[np.ndarray] = [self._new_vector() for _ in range(init_buffer_size)]
        self._outstanding: dict[int, weakref.ref[np.ndarray]] = {}

    @property
    def free_count(self) -> int:
        return len(self._buffer)

    @property
    def outstanding_count(self) -> int:
        return sum(1 for ref in self._outstanding.values() if ref() is not None)

    @property
    def allocated_total(self) -> int:
        """Number of arrays constructed by this pool (free list misses included)."""
        return self._allocated_total

    def _new_vector(self) -> np.ndarray:
        self._allocated_total += 1
        return np.zeros(self.fixed_vector_size, dtype=self.dtype)

    def allocate(self) -> np.ndarray:
        if self._buffer:
            val = self._buffer.pop()
        else:
            val = self._new_vector()
            _logger.debug("Pool miss: constructed vector #%d of size %d", self._allocated_total, self.fixed_vector_size)
        key = id(val)
        self._outstanding[key] = weakref.ref(val, partial(self._forget, key))
        return val

    def _forget(self, key: int, ref: weakref.ref) -> None:
        # Owner dropped the array without returning it.
        if self._outstanding.get(key) is ref:
            del self._outstanding[key]

    def owns(self, value: np.ndarray) -> bool:
        if not isinstance(value, np.ndarray):
            return False
        ref = self._outstanding.get(id(value))
        return ref is not None and ref() is value

    def deallocate(self, free: np.ndarray) -> None:
        if not isinstance(free, np.ndarray):
            raise PoolMisuseError(f"Expected a numpy array, got {type(free).__name__}.")
        if free.shape != (self.fixed_vector_size,) or free.dtype != self.dtype:
            raise PoolMisuseError(
                f"Vector of shape {free.shape} and dtype {free.dtype} does not fit a pool of "
                f"size {self.fixed_vector_size} and dtype {self.dtype}.",
                shape=free.shape,
                dtype=str(free.dtype),
            )
        if not self.owns(free):
            raise PoolMisuseError("Vector was not allocated by this pool or has already been returned.")
        del self._outstanding[id(free)]
        self._buffer.append(free)

    def clone(self, source: np.ndarray) -> np.ndarray:
        src = np.asarray(source)
        if src.shape != (self.fixed_vector_size,):
            raise PoolMisuseError(
                f"Cannot clone a vector of shape {src.shape} into a pool of size {self.fixed_vector_size}.",
                shape=src.shape,
            )
        new = self.allocate()
        np.copyto(new, src)
        return new


__all__ = ["MemoryTypedBuffer", "SimpleNonbufferedAllocator", "FixedSizeVectorsBuffer"]
