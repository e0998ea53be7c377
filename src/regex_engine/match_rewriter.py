"""
Match rewriter.
Rewrites every match of a pattern in place, tracking how far earlier
replacements have shifted the text so later matches land where they should.
"""

import regex
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

STRATEGY_OVERWRITE = 'overwrite'
STRATEGY_SPLICE = 'splice'
STRATEGIES = (STRATEGY_OVERWRITE, STRATEGY_SPLICE)


@dataclass(frozen=True)
class Replace:
    """Decision to rewrite a match with `text`."""
    text: str


class _Skip:
    """Decision to leave a match untouched."""

    def __repr__(self) -> str:
        return 'SKIP'


SKIP = _Skip()

Decision = Union[Replace, _Skip, str, None]
ReplacementCallback = Callable[[str, object], Decision]


@dataclass
class RewriteResult:
    """Outcome of a rewrite over one source text."""
    original_text: str
    new_text: str
    matches_count: int
    replaced_count: int


class ShiftedMatch:
    """
    Match found in a slice of a text, reporting positions in the whole text.
    Everything other than positions (group, groups, expand, ...) is the underlying match's.
    """

    def __init__(self, match, shift: int):
        self.match = match
        self.shift = shift

    def start(self, group=0) -> int:
        position = self.match.start(group)
        return position + self.shift if position >= 0 else position

    def end(self, group=0) -> int:
        position = self.match.end(group)
        return position + self.shift if position >= 0 else position

    def span(self, group=0) -> Tuple[int, int]:
        return self.start(group), self.end(group)

    def __getitem__(self, group):
        return self.match[group]

    def __getattr__(self, name):
        return getattr(self.match, name)

    def __repr__(self) -> str:
        return f"<ShiftedMatch span={self.span()} match={self.match.group(0)!r}>"


def resolve_range(source: str, search_range: Optional[Tuple[int, int]]) -> Tuple[int, int]:
    """
    Check a (start, end) search range against source; None means the whole text.

    Raises:
        ValueError: If the range is reversed or outside the text
    """
    if search_range is None:
        return 0, len(source)

    start, end = search_range
    if start < 0 or end > len(source) or start > end:
        raise ValueError(f"Search range {start}-{end} is outside text of length {len(source)}")
    return start, end


def iter_matches(compiled, source: str, search_range: Optional[Tuple[int, int]] = None):
    """
    Matches of a compiled pattern inside search_range, left to right.

    The range is searched as a text of its own: '^' and '$' match at its
    edges and lookarounds see nothing outside it. Positions of the yielded
    matches are in source coordinates.
    """
    pos, endpos = resolve_range(source, search_range)
    for match in compiled.finditer(source[pos:endpos]):
        yield ShiftedMatch(match, pos)


def _as_replacement(decision: Decision) -> Optional[str]:
    """Normalize a callback decision to replacement text, or None for skip."""
    if decision is None or decision is SKIP:
        return None
    if isinstance(decision, Replace):
        return decision.text
    if isinstance(decision, str):
        return decision
    raise TypeError(f"Replacement callback returned {type(decision).__name__}, "
                    f"expected Replace, SKIP, str or None")


class MatchRewriter:
    """
    Rewrites regex matches through a per-match callback.

    The default 'overwrite' strategy copies the replacement over the matched
    characters without deleting any: a replacement shorter than its match
    keeps the match's trailing characters ("abcd" -> "x" gives "xbcd"). The
    'splice' strategy replaces the whole match instead.
    """

    def __init__(self,
                 strategy: str = STRATEGY_OVERWRITE,
                 max_replacements: int = 0,
                 regex_module=regex):
        """
        Initialize match rewriter.

        Args:
            strategy: 'overwrite' or 'splice'
            max_replacements: Maximum number of rewritten matches (0 = unlimited)
            regex_module: Engine providing compile() and error ('regex' or 're')
        """
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy '{strategy}' (expected one of {', '.join(STRATEGIES)})")
        if max_replacements < 0:
            raise ValueError("max_replacements must be >= 0")

        self.strategy = strategy
        self.max_replacements = max_replacements
        self.regex_module = regex_module

    def rewrite(self,
                source: str,
                pattern: str,
                replacement: ReplacementCallback,
                flags: int = 0,
                search_range: Optional[Tuple[int, int]] = None) -> Optional[str]:
        """
        Rewrite matches of pattern in source.

        Args:
            source: Text to rewrite
            pattern: Regex pattern
            replacement: Called as replacement(matched_text, match) for each match,
                         left to right; match.span() is the region in source.
                         Returns Replace(text) / str to rewrite, SKIP / None to keep.
            flags: Regex flags
            search_range: (start, end) character positions to search, default whole text;
                          searched as a text of its own (anchors match at its edges)

        Returns:
            Rewritten text, or None if the pattern does not compile
        """
        result = self.rewrite_detailed(source, pattern, replacement, flags, search_range)
        return result.new_text if result else None

    def rewrite_detailed(self,
                         source: str,
                         pattern: str,
                         replacement: ReplacementCallback,
                         flags: int = 0,
                         search_range: Optional[Tuple[int, int]] = None) -> Optional[RewriteResult]:
        """Same as rewrite() but also reports match and replacement counts."""
        try:
            compiled = self.regex_module.compile(pattern, flags)
        except self.regex_module.error as e:
            print(f"Regex error: {e}")
            return None

        buffer: List[str] = list(source)
        offset = 0
        matches_count = 0
        replaced_count = 0

        for match in iter_matches(compiled, source, search_range):
            matches_count += 1
            if self.max_replacements and replaced_count >= self.max_replacements:
                continue

            matched_text = source[match.start():match.end()]
            new_text = _as_replacement(replacement(matched_text, match))
            if new_text is None:
                continue

            start = match.start() + offset
            if self.strategy == STRATEGY_SPLICE:
                buffer[start:start + len(matched_text)] = new_text
                offset += len(new_text) - len(matched_text)
            else:
                n = min(len(new_text), len(matched_text))
                buffer[start:start + n] = new_text[:n]
                if len(new_text) > n:
                    end = start + len(matched_text)
                    buffer[end:end] = new_text[n:]
                # Nothing is deleted, so the buffer only grows.
                offset += len(new_text) - n
            replaced_count += 1

        return RewriteResult(
            original_text=source,
            new_text=''.join(buffer),
            matches_count=matches_count,
            replaced_count=replaced_count,
        )


def replacing_matches(source: str,
                      pattern: str,
                      replacement: Callable[[str], Decision],
                      flags: int = 0) -> Optional[str]:
    """Rewrite every match in source with a callback that only sees the matched text."""
    return MatchRewriter().rewrite(source, pattern, lambda text, _match: replacement(text), flags)
