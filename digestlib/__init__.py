"""
digestlib - incremental message digests behind one protocol.

Each algorithm type supplies only the engine primitives; digesting,
hex and Bubble Babble output, equality and duplication are shared.

    >>> import digestlib
    >>> digestlib.SHA256.hexdigest(b"abc")[:16]
    'ba7816bf8f01cfea'
    >>> md5 = digestlib.MD5()
    >>> md5.update(b"a").update(b"bc")
    <MD5: 900150983cd24fb0d6963f7d28e17f72>

Algorithm types load on first access. ``digestlib.RMD160`` raises
AlgorithmUnavailable (an ImportError) when the extended provider is
not installed.
"""

import importlib
from typing import Any

from .core.exceptions import (
    AbstractTypeMisuse,
    AlgorithmUnavailable,
    DigestException,
    DuplicationFailure,
    EmptyInput,
    UnimplementedPrimitive,
    UnresolvedDescriptor,
)
from .digests import DigestBase, DigestClass, DigestInstance, register_digest
from .encoding import bubblebabble, hexencode

__version__ = "0.3.0"

_ALGORITHM_MODULES = {
    "MD5": ".md5",
    "SHA1": ".sha1",
    "SHA256": ".sha2",
    "SHA384": ".sha2",
    "SHA512": ".sha2",
    "RMD160": ".rmd160",
    "BLAKE3": ".blake3",
    "BubbleBabble": ".babble",
}


def __getattr__(name: str) -> Any:
    module_name = _ALGORITHM_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = importlib.import_module(module_name, __name__)
    return getattr(module, name)


def algorithm_types() -> dict[str, type[DigestBase]]:
    """Load every algorithm module that is supported here, keyed by type name."""
    types: dict[str, type[DigestBase]] = {}
    for name in _ALGORITHM_MODULES:
        try:
            types[name] = __getattr__(name)
        except AlgorithmUnavailable:
            continue
    return types


__all__ = [
    "AbstractTypeMisuse",
    "AlgorithmUnavailable",
    "DigestBase",
    "DigestClass",
    "DigestException",
    "DigestInstance",
    "DuplicationFailure",
    "EmptyInput",
    "UnimplementedPrimitive",
    "UnresolvedDescriptor",
    "algorithm_types",
    "bubblebabble",
    "hexencode",
    "register_digest",
]
