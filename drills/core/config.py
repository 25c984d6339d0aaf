"""\
Configurations
==============

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module provides the configuration objects used by the exercise
runner, its logging setup and its tracing setup.

Every option is declared as a `config_property` on a plain class. The
descriptor keeps the default on the class and writes overrides onto the
instance, so two instances of the same section never share state.
"""

from __future__ import annotations

import threading
import typing as t
from weakref import WeakKeyDictionary as WKDictionary

from drills.core.error import ConfigValidationError


if t.TYPE_CHECKING:
    from collections.abc import Iterable

__all__: tuple[str, ...] = (
    "Config",
    "ConsoleLoggerConfig",
    "FileLoggerConfig",
    "LoggerConfig",
    "TTYLoggerConfig",
    "TelemetryConfig",
    "config_property",
    "is_integer",
)

_ALLOWED_LOG_LEVELS: tuple[str, ...] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)
# NOTE: `qualName` and `extra` are filled in by the formatters in
# `drills.utils.logging`; a plain `logging.Formatter` cannot render this.
_DEFAULT_LOG_FMT: t.Final[str] = (
    "%(asctime)s %(levelname)s %(qualName)s:%(lineno)d %(extra)s: %(message)s"
)
_DEFAULT_LOG_DATEFMT: t.Final[str] = "%Y-%m-%dT%H:%M:%SZ"
_VERSION: t.Final[str] = "19.10.2026"


class config_property[T]:  # noqa: N801
    """Descriptor for configuration properties.

    This descriptor behaves like Python's built-in `property` but stores
    a default on the owner class and validates every assignment against
    the constraints it was declared with.

    :param default: Value returned until the property is assigned.
    :param frozen: Whether assignments are rejected, defaults to `False`.
    :param description: Optional human readable description.
    :param allowed: Optional collection of accepted values.
    :param check: Optional predicate every value must satisfy.
    :param between: Optional inclusive `(minimum, maximum)` bounds.
    """

    __slots__: tuple[str, ...] = (
        "allowed",
        "between",
        "check",
        "default",
        "description",
        "frozen",
        "locks",
        "property",
        "validate",
    )

    _global_lock: threading.RLock = threading.RLock()

    def __init__(
        self,
        default: T,
        *,
        frozen: bool = False,
        description: str | None = None,
        allowed: Iterable[T] | None = None,
        check: t.Callable[[T], bool] | None = None,
        between: tuple[int | float, ...] | None = None,
    ) -> None:
        """Initialise configuration property."""
        self.default = default
        self.frozen = frozen
        self.description = description
        self.allowed = allowed
        self.check = check
        self.between = between
        self.property: str = ""
        self.validate: bool = any([self.between, self.check, self.allowed])
        self.locks: WKDictionary[object, threading.RLock] = WKDictionary()

    def __set_name__(self, owner: type, name: str) -> None:
        """Bind the descriptor to its attribute name on `owner`.

        The default is validated once here so that a badly declared
        section fails at import time rather than on first use.

        :param owner: The class the descriptor is declared on.
        :param name: The attribute name the descriptor is bound to.
        :raises ConfigValidationError: If the default is invalid.
        """
        self.property = f"_{name}"
        if self.default is not None and self.validate:
            try:
                self.__validate__(self.default)
            except ConfigValidationError as error:
                raise ConfigValidationError(
                    f"got invalid value for {name!r}: {error}"
                ) from error
        setattr(owner, self.property, self.default)

    @t.overload
    def __get__(self, instance: None, owner: type) -> config_property[T]: ...

    @t.overload
    def __get__(self, instance: object, owner: type) -> T: ...

    def __get__(
        self,
        instance: object | None,
        owner: type,
    ) -> config_property[T] | T:
        """Return the property value, or the descriptor on class access."""
        if instance is None:
            return self
        return getattr(instance, self.property, self.default)

    def __set__(self, instance: object, value: T) -> None:
        """Set the property with validation & immutability checks.

        :param instance: The instance the property is assigned on.
        :param value: The value to be set for the property.
        :raises ConfigValidationError: If the property is frozen or the
            value fails validation.
        """
        if self.frozen:
            raise ConfigValidationError(
                f"cannot modify frozen property: {self.property[1:]!r}",
            )
        if self.validate:
            with self._acquire_lock(instance):
                self.__validate__(value)
        setattr(instance, self.property, value)

    def __validate__(self, value: t.Any) -> None:
        """Validate the property value based on constraints.

        :param value: The value to be validated.
        :raises ConfigValidationError: If the value does not meet the
            validation criteria.
        """
        if self.allowed is not None and value not in self.allowed:
            raise ConfigValidationError(
                f"{value!r} is not one of the allowed values "
                f"({', '.join(str(item) for item in self.allowed)})"
            )
        if self.check is not None:
            try:
                if not self.check(value):
                    raise ConfigValidationError("property validation failed")
            except ConfigValidationError:
                raise
            except Exception as error:
                raise ConfigValidationError(
                    f"property validation failed for {value!r} with "
                    f"message: {error}"
                ) from error
        if self.between is not None and len(self.between) == 2:
            minimum, maximum = self.between
            if not all(
                isinstance(num, int | float) for num in (minimum, maximum)
            ):
                raise ConfigValidationError("must be a tuple of two numbers")
            if not (minimum <= value <= maximum):
                raise ConfigValidationError(
                    f"{value} is not between {minimum} and {maximum}"
                )

    def _acquire_lock(self, instance: object) -> threading.RLock:
        """Return the lock guarding validation for `instance`.

        Locks are held weakly and disappear with their instance. Objects
        that cannot be weakly referenced or hashed share the global lock.
        """
        try:
            lock = self.locks.get(instance)
        except TypeError:
            return self._global_lock
        if lock is not None:
            return lock
        with self._global_lock:
            return self.locks.setdefault(instance, threading.RLock())


def is_integer(value: t.Any) -> bool:
    """Return `True` for integers that are not booleans."""
    return isinstance(value, int) and not isinstance(value, bool)


class FileLoggerConfig:
    """File logger configuration.

    Controls the optional rotating log file. Disabled by default so that
    running an exercise leaves nothing behind on disk.
    """

    enable: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )
    level: config_property[str] = config_property(
        "INFO",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    fmt: config_property[str] = config_property(_DEFAULT_LOG_FMT)
    datefmt: config_property[str] = config_property(_DEFAULT_LOG_DATEFMT)
    path: config_property[str] = config_property(
        "logs",
        check=lambda x: isinstance(x, str) and bool(x),
    )
    output: config_property[str] = config_property("drills.log")
    encoding: config_property[str] = config_property("utf-8", frozen=True)
    max_bytes: config_property[int] = config_property(
        10485760,
        check=lambda x: x >= 0,
    )
    backups: config_property[int] = config_property(5, check=lambda x: x >= 0)


class ConsoleLoggerConfig:
    """Console logger configuration.

    Console records go to standard error; standard output carries the
    exercise results only.
    """

    enable: config_property[bool] = config_property(
        True,
        allowed=[True, False],
    )
    level: config_property[str] = config_property(
        "WARNING",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    fmt: config_property[str] = config_property(_DEFAULT_LOG_FMT)
    datefmt: config_property[str] = config_property(_DEFAULT_LOG_DATEFMT)
    colour: config_property[bool] = config_property(
        True,
        allowed=[True, False],
    )


TTYLoggerConfig = ConsoleLoggerConfig


class LoggerConfig:
    """Logger configuration combining the file and console sections."""

    level: config_property[str] = config_property(
        "DEBUG",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    fmt: config_property[str] = config_property(_DEFAULT_LOG_FMT)
    datefmt: config_property[str] = config_property(_DEFAULT_LOG_DATEFMT)
    as_json: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )

    def __init__(self) -> None:
        """Create fresh nested sections for this instance."""
        self.file = FileLoggerConfig()
        self.tty = TTYLoggerConfig()


class TelemetryConfig:
    """Tracing configuration."""

    enabled: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )
    name: config_property[str | None] = config_property(None)


class Config:
    """Configuration.

    Top level configuration object handed to the runner and to the
    logging and tracing helpers.
    """

    name: config_property[str] = config_property("drills", frozen=True)
    version: config_property[str] = config_property(_VERSION, frozen=True)
    debug: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )

    def __init__(self) -> None:
        """Create fresh nested sections for this instance."""
        self.logger = LoggerConfig()
        self.telemetry = TelemetryConfig()
