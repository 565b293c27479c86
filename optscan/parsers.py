"""
Value parsers: turn captured option text into typed values.

Overview
- ValueParser: abstract converter bound to one target type. parse(text) returns
  the converted value or raises ValueError when the text does not denote one.
- StringParser: verbatim assignment (the "string-like" kind); only a
  validating str subclass can refuse the text.
- IntegerParser / FloatParser / BooleanParser: the primitive kinds.
- EnumParser: enumeration members by value, then by name.
- ConverterParser: generic fallback calling the target type on the text
  (pathlib.Path, decimal.Decimal, user callables, ...).

Resolution
- parser_for(type) walks type.__mro__ and returns the registered parser of the
  closest base, so a str subclass is string-like and an unknown class falls
  back to ConverterParser.
- enumerations always resolve to EnumParser, even IntEnum (whose MRO puts int
  first).
- register(type, parser) installs a parser factory for a type and its
  subclasses, unless a closer registration exists.
"""
import builtins
import enum
import functools
import re
from abc import ABC, abstractmethod


class ValueParser(ABC):
    """
    converter from option text to a value of `type`.

    contract
    - parse(text) returns the converted value.
    - parse(text) raises ValueError when text is not a valid spelling; the
      scanner treats that as an unparseable value and never lets it escape.
    - stringlike parsers accept anything verbatim.
    """
    stringlike = False

    def __init__(self, type, /):
        if not callable(type):
            raise TypeError("%s() argument must be a callable type" % builtins.type(self).__qualname__)
        self.type = type

    @abstractmethod
    def parse(self, text, /): ...

    def __repr__(self):
        return "%s(%s)" % (type(self).__qualname__, getattr(self.type, "__qualname__", repr(self.type)))


class StringParser(ValueParser):
    """
    verbatim text. a str subclass is called with the text, and its
    constructor may still refuse it.
    """
    stringlike = True

    def parse(self, text, /):
        if self.type is str:
            return text
        try:
            return self.type(text)
        except (TypeError, LookupError, ArithmeticError) as exception:
            raise ValueError(str(exception)) from exception


class IntegerParser(ValueParser):
    """
    decimal integers with an optional sign; surrounding whitespace is ignored.

    underscores, radix prefixes and trailing characters are all rejected so
    '-j4x' does not silently become 4.
    """
    pattern = re.compile(r"\s*[+-]?\d+\s*")

    def parse(self, text, /):
        if not self.pattern.fullmatch(text):
            raise ValueError("invalid integer literal %r" % text)
        return self.type(text.strip())


class FloatParser(ValueParser):

    def parse(self, text, /):
        if "_" in text:
            raise ValueError("invalid floating-point literal %r" % text)
        return self.type(text)


class BooleanParser(ValueParser):
    truthy = frozenset({"1", "true", "yes", "on"})
    falsy = frozenset({"0", "false", "no", "off"})

    def parse(self, text, /):
        folded = text.strip().lower()
        if folded in self.truthy:
            return True
        if folded in self.falsy:
            return False
        raise ValueError("invalid boolean literal %r" % text)


class EnumParser(ValueParser):

    def parse(self, text, /):
        for member in self.type:
            if str(member.value) == text:
                return member
        try:
            return self.type[text]
        except KeyError:
            raise ValueError("%r is not a valid %s" % (text, self.type.__qualname__)) from None


class ConverterParser(ValueParser):
    """
    generic fallback: call the target type with the text.

    TypeError, LookupError (a mapping lookup) and ArithmeticError
    (decimal.InvalidOperation) from the converter are reported as ValueError too.
    """

    def parse(self, text, /):
        try:
            return self.type(text)
        except (TypeError, LookupError, ArithmeticError) as exception:
            raise ValueError(str(exception)) from exception


_registry = {
    str: StringParser,
    bool: BooleanParser,
    int: IntegerParser,
    float: FloatParser,
}


def register(type, parser, /):
    """
    install `parser` (a ValueParser subclass or factory) for `type`.

    the factory is called with the slot type and must return a ValueParser.
    returns the factory unchanged.
    """
    if not isinstance(type, builtins.type):
        raise TypeError("register() first argument must be a type")
    if not callable(parser):
        raise TypeError("register() second argument must be a parser factory")
    _registry[type] = parser
    parser_for.cache_clear()
    return parser


@functools.cache
def parser_for(type, /):
    """
    resolve the parser for a slot type.

    lookup
    - enumerations: EnumParser (unless registered explicitly).
    - classes: the registered factory of the first class in type.__mro__.
    - other callables (functions, partials) and unregistered classes:
      ConverterParser.
    """
    if not callable(type):
        raise TypeError("parser_for() argument must be a callable type")
    if isinstance(type, builtins.type):
        if issubclass(type, enum.Enum) and type not in _registry:
            return EnumParser(type)
        for base in type.__mro__:
            try:
                factory = _registry[base]
            except KeyError:
                continue
            return factory(type)
    return ConverterParser(type)


__all__ = (
    "ValueParser",
    "StringParser",
    "IntegerParser",
    "FloatParser",
    "BooleanParser",
    "EnumParser",
    "ConverterParser",
    "register",
    "parser_for",
)
