"""
Traits — контракты способностей скалярного типа.

Identities (Zero/One) и операторные протоколы, которыми Matrix и Vector
ограничивают свои операции.
"""

from src.cantor.traits.capabilities import (
    CapabilityError,
    SupportsAdd,
    SupportsInplaceAdd,
    SupportsInplaceMul,
    SupportsInplaceSub,
    SupportsMul,
    SupportsNeg,
    SupportsSub,
    has_capability,
    is_scalar,
    require_capability,
)
from src.cantor.traits.identities import (
    One,
    Zero,
    additive_identity,
    has_additive_identity,
    has_multiplicative_identity,
    multiplicative_identity,
    register_identities,
    unregister_identities,
)

__all__ = [
    # Capabilities — Exceptions
    "CapabilityError",
    # Capabilities — Protocols
    "SupportsAdd",
    "SupportsSub",
    "SupportsMul",
    "SupportsNeg",
    "SupportsInplaceAdd",
    "SupportsInplaceSub",
    "SupportsInplaceMul",
    # Capabilities — Functions
    "has_capability",
    "is_scalar",
    "require_capability",
    # Identities — Protocols
    "Zero",
    "One",
    # Identities — Functions
    "additive_identity",
    "multiplicative_identity",
    "has_additive_identity",
    "has_multiplicative_identity",
    "register_identities",
    "unregister_identities",
]
