"""
Three-component (major.minor.patch) version values.

SemanticVersion.parse() is lenient the way a "%d.%d.%d" scan is: it reads as
many leading numeric fields as it can and leaves the rest at 0. Ordering is
lexicographic over (major, minor, patch).
"""
import functools
import re

_pattern = re.compile(r"\s*\+?(\d+)(?:\.\s*\+?(\d+)(?:\.\s*\+?(\d+))?)?")


@functools.total_ordering
class SemanticVersion:
    __slots__ = ("_major", "_minor", "_patch")

    def __init__(self, major=0, minor=0, patch=0, /):
        for field in (major, minor, patch):
            if not isinstance(field, int) or isinstance(field, bool):
                raise TypeError("SemanticVersion() arguments must be integers")
            if field < 0:
                raise ValueError("SemanticVersion() arguments must be non-negative")
        self._major = major
        self._minor = minor
        self._patch = patch

    @classmethod
    def parse(cls, text, /):
        """
        parse "major.minor.patch" leniently.

        - a leading '.' reads as "0." and a trailing '.' as ".0"
          (".5" -> 0.5.0, "2." -> 2.0.0).
        - fields that are missing or not numeric stay 0, and so do all
          fields after them ("1.x.3" -> 1.0.0, "" -> 0.0.0).
        """
        if not isinstance(text, str):
            raise TypeError("SemanticVersion.parse() argument must be a string")
        if text.startswith("."):
            text = "0" + text
        if text.endswith("."):
            text += "0"
        match = _pattern.match(text)
        if not match:
            return cls()
        return cls(*(int(field) if field else 0 for field in match.groups()))

    @property
    def major(self):
        return self._major

    @property
    def minor(self):
        return self._minor

    @property
    def patch(self):
        return self._patch

    def _key(self):
        return self._major, self._minor, self._patch

    def __eq__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return "%d.%d.%d" % self._key()

    def __repr__(self):
        return "SemanticVersion(%d, %d, %d)" % self._key()

    def __rich_repr__(self):
        yield self._major
        yield self._minor
        yield self._patch


__all__ = ("SemanticVersion",)
