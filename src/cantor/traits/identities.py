"""
Identities — Аддитивная и мультипликативная единицы скалярного типа

Контракты Zero / One:
- Zero: тип предоставляет атрибут класса ZERO (x + ZERO == x)
- One:  тип предоставляет classmethod one() (x * one() == x)

Встроенные числовые типы не могут реализовать протоколы сами, поэтому
для них единицы хранятся в реестре. Пользовательский тип может либо
реализовать протокол, либо зарегистрироваться через register_identities().

Порядок разрешения: протокол → реестр → CapabilityError.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Final, Optional, Protocol, runtime_checkable

from src.cantor.traits.capabilities import CapabilityError


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class Zero(Protocol):
    """Тип с аддитивной единицей (атрибут класса ZERO)."""

    ZERO: Any


@runtime_checkable
class One(Protocol):
    """Тип с мультипликативной единицей (classmethod one())."""

    @classmethod
    def one(cls) -> Any: ...


# =============================================================================
# REGISTRY
# =============================================================================

# kind -> (zero, one)
_BUILTIN_IDENTITIES: Final[dict[type, tuple[Any, Any]]] = {
    int: (0, 1),
    float: (0.0, 1.0),
    complex: (0j, 1 + 0j),
    Fraction: (Fraction(0), Fraction(1)),
    Decimal: (Decimal(0), Decimal(1)),
}

_REGISTRY: dict[type, tuple[Any, Any]] = dict(_BUILTIN_IDENTITIES)


def register_identities(kind: type, zero: Any, one: Any) -> None:
    """
    Регистрация единиц для типа, который не реализует Zero/One.

    Повторная регистрация перезаписывает предыдущие значения.

    Args:
        kind: Скалярный тип
        zero: Аддитивная единица
        one: Мультипликативная единица

    Raises:
        TypeError: Если kind не является типом
    """
    if not isinstance(kind, type):
        raise TypeError(f"kind must be a type, got {kind!r}")
    _REGISTRY[kind] = (zero, one)


def unregister_identities(kind: type) -> None:
    """Удаление регистрации (встроенные типы восстанавливаются к умолчанию)."""
    _REGISTRY.pop(kind, None)
    if kind in _BUILTIN_IDENTITIES:
        _REGISTRY[kind] = _BUILTIN_IDENTITIES[kind]


# =============================================================================
# RESOLUTION
# =============================================================================


def _registered(kind: type) -> Optional[tuple[Any, Any]]:
    # Поиск по MRO: bool → int, numpy.float64 → float
    for base in getattr(kind, "__mro__", (kind,)):
        if base in _REGISTRY:
            return _REGISTRY[base]
    return None


def has_additive_identity(kind: type) -> bool:
    """True если для kind известна аддитивная единица."""
    return isinstance(kind, Zero) or _registered(kind) is not None


def has_multiplicative_identity(kind: type) -> bool:
    """True если для kind известна мультипликативная единица."""
    return isinstance(kind, One) or _registered(kind) is not None


def additive_identity(kind: type) -> Any:
    """
    Аддитивная единица типа.

    Args:
        kind: Скалярный тип

    Returns:
        z такой, что x + z == x

    Raises:
        CapabilityError: Если тип не предоставляет ZERO и не зарегистрирован

    Examples:
        >>> additive_identity(int)
        0
        >>> additive_identity(Fraction)
        Fraction(0, 1)
    """
    if isinstance(kind, Zero):
        return kind.ZERO
    registered = _registered(kind)
    if registered is not None:
        return registered[0]
    raise CapabilityError(
        f"{getattr(kind, '__name__', kind)} has no additive identity "
        f"(define ZERO or call register_identities)"
    )


def multiplicative_identity(kind: type) -> Any:
    """
    Мультипликативная единица типа.

    Args:
        kind: Скалярный тип

    Returns:
        u такой, что x * u == x

    Raises:
        CapabilityError: Если тип не предоставляет one() и не зарегистрирован
    """
    if isinstance(kind, One):
        return kind.one()
    registered = _registered(kind)
    if registered is not None:
        return registered[1]
    raise CapabilityError(
        f"{getattr(kind, '__name__', kind)} has no multiplicative identity "
        f"(define one() or call register_identities)"
    )
