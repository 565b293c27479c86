"""
Comma-joined reporting of non-zero values.

Accumulator prints a value only when it is truthy and puts ", " in front of
every printed value but the first. Typical use is a one-line summary where
empty counters are skipped:

    had = Accumulator()
    line = had(errors, " errors") + had(warnings, " warnings") + had(notes, " notes")
    # errors=2, warnings=0, notes=1 -> "2 errors, 1 notes"
"""


class Accumulator:
    """
    stateful "have I printed before" separator.

    - __call__(value, suffix=None) -> str: "" for a falsy value, otherwise the
      value (plus suffix), preceded by ", " when something was printed already.
    - reset(): forget earlier output.
    - truthiness: True once something was printed.
    """

    def __init__(self):
        self._printed = False

    def __call__(self, value, suffix=None, /):
        if not value:
            return ""
        fragment = ", " if self._printed else ""
        self._printed = True
        fragment += str(value)
        if suffix:
            fragment += str(suffix)
        return fragment

    def reset(self):
        self._printed = False

    def __bool__(self):
        return self._printed

    def __repr__(self):
        return "Accumulator(printed=%r)" % self._printed


__all__ = ("Accumulator",)
