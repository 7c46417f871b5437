# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Shared cache of :class:`~typemeta.reflector.Reflector` instances.

    >>> from typemeta import ReflectorFactory
    >>> class Point:
    ...     x: int = 0
    ...     y: int = 0
    >>> factory = ReflectorFactory()
    >>> factory.find_for_class(Point) is factory.find_for_class(Point)
    True
    >>> factory.find_for_class(Point).writable_property_names
    ('x', 'y')

"""

import functools
import threading

from .config import ReflectorConfig
from .reflector import Reflector
from .util.mixins import LoggableMixin


class ReflectorFactory(LoggableMixin):
    """Build each class's :class:`Reflector` once and hand out the same instance afterwards.

    The first build of a class happens under a lock specific to that class: concurrent callers asking for the same
    class wait for the single build in progress, while different classes build in parallel. A build that raises is not
    cached, so the next caller tries again.

    Entries are held until :meth:`clear` is called.
    """

    def __init__(self, config: ReflectorConfig | None = None) -> None:
        self._config = config if config is not None else ReflectorConfig.default()
        self._class_cache_enabled = self._config.class_cache_enabled

        self._lock = threading.Lock()
        self._cache: dict[type, Reflector] = {}
        self._building: dict[type, threading.Lock] = {}

    @property
    def config(self) -> ReflectorConfig:
        return self._config

    @property
    def class_cache_enabled(self) -> bool:
        return self._class_cache_enabled

    @class_cache_enabled.setter
    def class_cache_enabled(self, value: bool) -> None:
        self._class_cache_enabled = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, klass: object) -> bool:
        with self._lock:
            return klass in self._cache

    def clear(self) -> None:
        """Drop every cached reflector."""
        with self._lock:
            self._cache.clear()

    def find_for_class(self, klass: type) -> Reflector:
        """Return the reflector for *klass*, building it if it is not cached yet.

        Raises:
            AmbiguousAccessorError: If *klass* has ambiguous accessors.

        """
        if not self._class_cache_enabled:
            return Reflector(klass, self._config)

        with self._lock:
            if (reflector := self._cache.get(klass)) is not None:
                return reflector
            build_lock = self._building.setdefault(klass, threading.Lock())

        with build_lock:
            with self._lock:
                if (reflector := self._cache.get(klass)) is not None:
                    return reflector

            self.log.debug(t"Cache miss for {klass.__qualname__}")
            reflector = Reflector(klass, self._config)

            # The build lock stays registered after a failure, so retries remain serialized
            with self._lock:
                self._cache[klass] = reflector
                if self._building.get(klass) is build_lock:
                    del self._building[klass]
            return reflector


@functools.cache
def default_factory() -> ReflectorFactory:
    """Return the process-wide factory using the default configuration."""
    return ReflectorFactory()
