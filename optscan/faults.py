"""
optscan faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue
  a host program can report after scanning. Codes are grouped by domain.
- ScanException / ScanWarning: base types that carry message + options and know
  how to render themselves in a friendly, lowercased, actionable way.
- trigger(): central entry point to surface any fault (respecting shell/deferred/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.
- assert_hard() / check_io_status(): hard checks that survive `python -O`.

The matcher itself never raises: Scanner.match() returns a bool and records an
Outcome. Faults are the host's policy layer, built by Scanner.reject() and fired
with trigger().

Host configuration (read from __main__ when present)
- __prog__:   program name shown in headers (defaults to the scanner's argv[0]).
- __styles__: overrides for the rich styles used below.
- __codes__:  FaultCode -> label remapping (see FaultCode.normalize).
- __docs__:   FaultCode -> documentation string (see getdoc).
"""
import copy
import errno
import inspect
import os
import sys
import warnings
from abc import ABC
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - scanning (2110x/2111x)
      • UNKNOWN_OPTION, MISSING_VALUE, UNPARSEABLE_VALUE
    - environment (2112x)
      • IO_FAILURE
    - internal (2113x)
      • INTERNAL_ERROR
    - warnings (22xxx)
      • IO_WARNING
    """
    # --- scanning errors (21xxx) ---
    UNKNOWN_OPTION      = 21101
    MISSING_VALUE       = 21111
    UNPARSEABLE_VALUE   = 21112

    # --- environment errors (21xxx) ---
    IO_FAILURE          = 21121

    # --- internal errors (21xxx) ---
    INTERNAL_ERROR      = 21131

    # --- warnings (22xxx) ---
    IO_WARNING          = 22121

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _prog(options):
    main = __import__("__main__")
    try:
        return getattr(main, "__prog__")
    except AttributeError:
        pass
    scanner = options.get("scanner")
    if scanner is not None and scanner.tokens:
        return os.path.basename(scanner.tokens[0])
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "optscan"


def _render(fault, defaults, title_style, message_style):
    """
    shared rich rendering for exceptions and warnings.

    options consulted: colorful, fancy, ratio, title, code, hint.
    """
    main = __import__("__main__")
    options = fault.options

    styles = defaultdict(str, defaults | getattr(main, "__styles__", {}))
    colorful = options.get("colorful", False)
    fancy = options.get("fancy", False)

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), styles[style])

    code = options.get("code")
    header = Text.assemble(
        "[ ",
        text(_prog(options), "prog-name"),
        " — ",
        text(code.normalize() if isinstance(code, FaultCode) else code, "code"),
        " | ",
        text(str(options.get("title", "")).title(), title_style),
        " ]"
    )
    message = text(fault.message, message_style)
    body = [message]
    if options.get("hint"):
        body.append(Text.assemble(text(" → ", "hint-arrow"), text(options["hint"], "hint")))

    if fancy:
        try:
            width = int((console.width - 4) * options["ratio"])
        except KeyError:
            width = None
        return Panel(Group(*body), title=header, title_align="left", width=width)

    return Group(header, *body)


class ScanException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Text) or message is Unset
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        }, "error-title", "error-message")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        if self.options.get("deferred", False):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownOptionError(ScanException): ...
class MissingValueError(ScanException): ...
class UnparseableValueError(ScanException): ...
class IOStatusError(ScanException): ...
class InternalError(ScanException): ...


class ScanWarning(ABC, Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Text) or message is Unset
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "warning-title": "bold #FFC2E0",  # softer pinky title for warnings

            # body
            "warning-message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        }, "warning-title", "warning-message")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class IOStatusWarning(ScanWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.
    - in shell mode, rendering happens via the rich stderr console; otherwise
      exceptions are raised and warnings go through warnings.warn.

    typical options
    - shell, fancy, colorful, deferred, ratio, title, code, hint, and any other
      context the reporter may want to keep (scanner, token, index, spellings).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


def assert_hard(condition, message="", /, **options):
    """
    raise InternalError unless `condition` holds, even under `python -O`.
    """
    if condition:
        return
    trigger(InternalError(
        "internal check failed%s" % (": %s" % message if message else ""),
        title="internal error",
        code=FaultCode.INTERNAL_ERROR,
        hint="this is a bug in the program, please report it",
        docs=getdoc(FaultCode.INTERNAL_ERROR),
    ), **options)


def check_io_status(ok, message, /, hard=True, *, error=None, **options):
    """
    report a failed I/O step together with its errno text.

    parameters
    - ok: truthy when the step succeeded.
    - message: what was being attempted (e.g. "cannot open 'model.mzn'").
    - hard: raise IOStatusError when True, emit IOStatusWarning otherwise.
    - error: the OSError (or bare errno number) explaining the failure, if known.

    behavior
    - ok is truthy: nothing happens.
    - otherwise the message and strerror(errno) are printed to stderr, then
      the fault is triggered with the remaining options.
    """
    if ok:
        return
    number = error.errno if isinstance(error, OSError) else error
    if isinstance(number, int) and number:
        reason = os.strerror(number)
    elif isinstance(error, OSError) and error.strerror:
        reason = error.strerror
    else:
        reason = "unknown error"
    console.print(Text("\n  %s:   %s." % (message, reason)), highlight=False)
    fault = IOStatusError if hard else IOStatusWarning
    trigger(fault(
        "%s: %s" % (message, reason),
        title="i/o failure" if hard else "i/o problem",
        code=FaultCode.IO_FAILURE if hard else FaultCode.IO_WARNING,
        hint="check that the path exists and is accessible",
        errno=errno.errorcode.get(number) if isinstance(number, int) else None,
        docs=getdoc(FaultCode.IO_FAILURE if hard else FaultCode.IO_WARNING),
    ), **options)


__all__ = (
    "ScanException",
    "UnknownOptionError",
    "MissingValueError",
    "UnparseableValueError",
    "IOStatusError",
    "InternalError",
    "ScanWarning",
    "IOStatusWarning",
    "FaultCode",
    "trigger",
    "getdoc",
    "assert_hard",
    "check_io_status",
)
