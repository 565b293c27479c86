import functools
from typing import final


@final
class UnsetType:
    """
    internal singleton sentinel representing an "unset" value.

    intent
    - distinguishes "not provided" from a user-supplied value (including None,
      0 or an empty string).
    - the scanner uses it as the "no value slot" marker, so a presence-only
      probe reads as match("-v") while a value probe passes a Slot.

    behavior
    - truthiness: bool(Unset) is False.
    - identity: Unset is a process-wide singleton (see __new__).
    - display: repr(Unset) -> "Unset".
    - final: subclassing is forbidden (see __init_subclass__).
    """

    def __or__(self, other, /):
        """
        support UnsetType | T in annotations.
        """
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        support T | UnsetType in annotations.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        # pickles back to the module singleton
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0, "" or [] are preserved as-is; only Unset is
    replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def beginswith(text, prefix, /):
    """
    Return True when `text` starts with `prefix` (truncated comparison).
    """
    if not isinstance(text, str) or not isinstance(prefix, str):
        raise TypeError("beginswith() arguments must be strings")
    return text[:len(prefix)] == prefix


def split(text, /):
    """
    Split a string into whitespace-delimited words.

    Runs of whitespace count as one separator and no empty entries are
    produced, neither leading nor trailing.

    Examples
    - split("-a  -abbrev ") -> ["-a", "-abbrev"]
    - split("   ")           -> []
    """
    if not isinstance(text, str):
        raise TypeError("split() argument must be a string")
    return text.split()


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a valid, user-meaningful value but you
still need to distinguish “no input” from “explicitly passed None”.
"""


__all__ = (
    # Functions
    "coalesce",
    "beginswith",
    "split",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
