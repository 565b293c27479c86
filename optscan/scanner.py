r"""
optscan scanner: positional, single-pass option matching over argv-like tokens.

Overview
- Scanner owns the token sequence and the cursor. The host program walks the
  tokens once and, for the token under the cursor, probes each known option in
  turn with Scanner.match(). The first probe that succeeds wins; when none does,
  the token is unknown and the host decides what to do (usually reject()).
- Slot is the typed cell a value-bearing probe writes into. A probe without a
  slot is a presence flag.

Matching rules (per spelling, in declaration order)
- short spellings (<= 2 chars, e.g. "-j") probed with a slot match by prefix,
  so "-j4" reads as "-j" with the value "4" glued on.
- every other probe needs the token to equal the spelling exactly.
- a matched value-bearing spelling takes its value from the rest of the token
  (combined form) or from the next token (separate form).

Cursor convention
- after a successful match the cursor rests on the LAST token the option
  consumed: the flag itself, the combined token, or the separate value.
  The scan loop (step() / iteration) moves past it.
- a failed probe leaves the cursor exactly where it started.

Example
    scanner = Scanner(["prog", "-j", "4", "--verbose", "-Ogecode"], 1)
    jobs, solver = Slot(int), Slot(str)
    verbose = False
    for token in scanner:
        if scanner.match("-j --jobs", jobs):
            continue
        if scanner.match("-O --solver", solver):
            continue
        if scanner.match("-v --verbose"):
            verbose = True
            continue
        trigger(scanner.reject())
"""
import difflib
import sys
from collections.abc import Iterable
from enum import Enum

from .faults import FaultCode, UnknownOptionError, MissingValueError, UnparseableValueError, getdoc
from .parsers import parser_for
from .utils import Unset, beginswith, coalesce, split


class Outcome(Enum):
    """
    what the last Scanner.match() call concluded.

    this is a diagnostic record for the host's reporting; the bool returned by
    match() stays the contract.
    """
    MATCHED = "matched"
    NO_MATCH = "no match"
    END_OF_INPUT = "end of input"
    MISSING_VALUE = "missing value"
    UNPARSEABLE_VALUE = "unparseable value"


def _ordinal(number):
    """
    1-based position label: "first" to "third" in words, then "4th", "11th", "22nd", ...
    """
    if 1 <= number <= 3:
        return ("first", "second", "third")[number - 1]
    if 10 < number % 100 < 20:
        return "%dth" % number
    return "%d%s" % (number, {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th"))


class Slot:
    """
    typed output cell for a value-bearing option.

    - type: the target type; its parser is resolved once via parser_for().
    - value: Unset (or `default`) until a match writes into it.
    - filled: True once a match captured a value.

    A slot keeps the last captured value when the same option repeats; the
    host can reset() it between passes.
    """

    def __init__(self, type=str, /, default=Unset):
        self._type = type
        self._parser = parser_for(type)
        self._default = default
        self._value = default
        self._filled = False

    @property
    def type(self):
        return self._type

    @property
    def parser(self):
        return self._parser

    @property
    def value(self):
        return self._value

    @property
    def filled(self):
        return self._filled

    def get(self, default=None, /):
        return coalesce(self._value, default)

    def reset(self):
        self._value = self._default
        self._filled = False

    def _fill(self, value):
        self._value = value
        self._filled = True

    def __bool__(self):
        return self._filled

    def __repr__(self):
        return "Slot(%s, value=%r)" % (getattr(self._type, "__qualname__", repr(self._type)), self._value)

    def __rich_repr__(self):
        yield "type", getattr(self._type, "__qualname__", repr(self._type))
        yield "value", self._value
        yield "filled", self._filled


class Scanner:
    """
    cursor over an immutable token sequence, probed once per known option.

    parameters
    - tokens: Iterable[str]; copied into a tuple, never mutated.
    - cursor: int, 0 <= cursor <= len(tokens); default 0.

    state
    - cursor: position of the token under examination.
    - origin: the starting cursor; messages count positions from it (1-based).
    - outcome: Outcome of the last match() call (None before the first one).
    - candidates: spellings probed against the current token since the cursor
      last moved (by step(), seek() or a consumed value token), used to
      suggest near matches in reject().
    """

    def __init__(self, tokens, cursor=0, /):
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("Scanner() first argument must be an iterable of strings")
        tokens = tuple(tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("Scanner() first argument must be an iterable of strings")
        if not isinstance(cursor, int) or isinstance(cursor, bool):
            raise TypeError("Scanner() second argument must be an integer")
        if not 0 <= cursor <= len(tokens):
            raise ValueError("Scanner() cursor %d is out of range [0, %d]" % (cursor, len(tokens)))

        self._tokens = tokens
        self._origin = cursor
        self._cursor = cursor
        self._outcome = None
        self._candidates = {}
        self._failure = None

    @classmethod
    def argv(cls):
        """
        build a scanner over sys.argv, starting after the program name.
        """
        return cls(sys.argv, min(1, len(sys.argv)))

    @property
    def tokens(self):
        return self._tokens

    @property
    def cursor(self):
        return self._cursor

    @property
    def token(self):
        return self._tokens[self._cursor] if self._cursor < len(self._tokens) else None

    @property
    def exhausted(self):
        return self._cursor >= len(self._tokens)

    @property
    def outcome(self):
        return self._outcome

    @property
    def candidates(self):
        return tuple(self._candidates)

    def step(self):
        """
        move past the current token (no-op at end of input).
        """
        if self._cursor < len(self._tokens):
            self._cursor += 1
        self._candidates.clear()
        self._failure = None

    def seek(self, position, /):
        if not isinstance(position, int) or isinstance(position, bool):
            raise TypeError("seek() argument must be an integer")
        if not 0 <= position <= len(self._tokens):
            raise ValueError("seek() position %d is out of range [0, %d]" % (position, len(self._tokens)))
        self._cursor = position
        self._candidates.clear()
        self._failure = None

    def __iter__(self):
        """
        the scan loop: yield the current token, then step past whatever the
        loop body consumed.
        """
        while self._cursor < len(self._tokens):
            yield self._tokens[self._cursor]
            self.step()

    def __len__(self):
        return len(self._tokens)

    def _settle(self, outcome, result, keyword=None, text=None):
        self._outcome = outcome
        # value failures outrank later misses at the same token
        if outcome in (Outcome.MISSING_VALUE, Outcome.UNPARSEABLE_VALUE):
            self._failure = outcome, keyword, text
        return result

    def match(self, spellings, slot=Unset, optional=False):
        """
        probe the current token against one option's spellings.

        parameters
        - spellings: str, space-separated accepted spellings (e.g. "-o --output"),
          tried in order; the first that matches decides the call.
        - slot: Slot receiving the value; omit for a presence flag.
        - optional: whether the option may go without a value (separate form
          only: a missing or unparseable next token is then left alone).

        returns
        - True when the token is this option (and its value, if any, was
          captured); False otherwise.

        side effects
        - cursor: +1 only when a separate value token was consumed.
        - slot: written only when a value was captured.
        """
        assert "," not in spellings, "spellings must be space-separated, not comma-separated"
        assert ";" not in spellings, "spellings must be space-separated, not semicolon-separated"
        if slot is not Unset and not isinstance(slot, Slot):
            raise TypeError("match() slot must be a Slot")

        if self._cursor >= len(self._tokens):
            return self._settle(Outcome.END_OF_INPUT, False)

        arg = self._tokens[self._cursor]
        for keyword in split(spellings):
            self._candidates[keyword] = None

            # short value-bearing spellings compare by prefix, anything else exactly
            if (len(keyword) > 2 or slot is Unset) and arg != keyword:
                continue
            if not beginswith(arg, keyword):
                continue

            combined = len(keyword) < len(arg)
            if combined:
                if slot is Unset:
                    continue
                text = arg[len(keyword):]
            else:
                if slot is Unset:
                    return self._settle(Outcome.MATCHED, True, keyword)
                self._cursor += 1
                if self._cursor >= len(self._tokens):
                    self._cursor -= 1
                    return self._settle(
                        Outcome.MATCHED if optional else Outcome.MISSING_VALUE, optional, keyword
                    )
                text = self._tokens[self._cursor]

            try:
                value = slot.parser.parse(text)
            except ValueError:
                if combined:
                    return self._settle(Outcome.UNPARSEABLE_VALUE, False, keyword, text)
                self._cursor -= 1
                return self._settle(
                    Outcome.MATCHED if optional else Outcome.UNPARSEABLE_VALUE, optional, keyword, text
                )
            if not combined:
                # the cursor now rests on the value token
                self._candidates.clear()
                self._failure = None
            slot._fill(value)
            return self._settle(Outcome.MATCHED, True, keyword, text)

        return self._settle(Outcome.NO_MATCH, False)

    def get(self, spellings, slot=Unset, optional=False):
        """
        alias of match().
        """
        return self.match(spellings, slot, optional)

    def reject(self, **options):
        """
        build the fault explaining why the current token was not accepted.

        the fault depends on the last outcome, except that a missing or
        unparseable value seen at this token outranks later misses:
        - NO_MATCH: UnknownOptionError, with close matches among the spellings
          probed at this token as suggestions.
        - MISSING_VALUE: MissingValueError.
        - UNPARSEABLE_VALUE: UnparseableValueError.

        the fault is returned, not raised; pass it to trigger() (or raise it)
        according to the host's policy. extra options are stored on it.

        raises
        - ValueError: when the last match did not fail, or nothing was probed.
        """
        index = self._cursor
        token = self.token
        position = _ordinal(max(index - self._origin, 0) + 1)
        outcome, keyword, text = self._outcome, None, None
        if outcome in (Outcome.NO_MATCH, Outcome.MISSING_VALUE, Outcome.UNPARSEABLE_VALUE) and self._failure:
            outcome, keyword, text = self._failure
        match outcome:
            case Outcome.NO_MATCH:
                suggestions = difflib.get_close_matches(token, self._candidates.keys(), 5)
                try:
                    hint = "did you mean %r?" % suggestions[0]
                except IndexError:
                    hint = "check the spelling, or pass it after '--' if it is not an option"
                return UnknownOptionError(
                    "unknown option %r at %s position" % (token, position),
                    title="unknown option",
                    code=FaultCode.UNKNOWN_OPTION,
                    scanner=self,
                    token=token,
                    index=index,
                    suggestions=suggestions,
                    hint=hint,
                    docs=getdoc(FaultCode.UNKNOWN_OPTION),
                    **options
                )
            case Outcome.MISSING_VALUE:
                return MissingValueError(
                    "option %r at %s position requires a value" % (keyword, position),
                    title="missing value",
                    code=FaultCode.MISSING_VALUE,
                    scanner=self,
                    token=token,
                    index=index,
                    keyword=keyword,
                    hint="pass the value after a space (for example: %s <value>)" % keyword,
                    docs=getdoc(FaultCode.MISSING_VALUE),
                    **options
                )
            case Outcome.UNPARSEABLE_VALUE:
                return UnparseableValueError(
                    "bad value %r for option %r at %s position" % (text, keyword, position),
                    title="unparseable value",
                    code=FaultCode.UNPARSEABLE_VALUE,
                    scanner=self,
                    token=token,
                    index=index,
                    keyword=keyword,
                    value=text,
                    hint="give %s a value it can read" % keyword,
                    docs=getdoc(FaultCode.UNPARSEABLE_VALUE),
                    **options
                )
            case _:
                raise ValueError("reject() requires a failed match, last outcome was %r" % outcome)

    def __repr__(self):
        return "Scanner(%r, %d)" % (list(self._tokens), self._cursor)

    def __rich_repr__(self):
        yield "tokens", self._tokens
        yield "cursor", self._cursor
        yield "token", self.token
        yield "outcome", self._outcome


__all__ = (
    "Outcome",
    "Slot",
    "Scanner",
)
