"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Exceptions raised by the big integer type
"""


class InvalidInput(ValueError):
    """Raised when a value cannot be built from the given input"""


class ResourceExhaustion(MemoryError):
    """Raised when a limb buffer cannot be allocated"""
