"""String algorithms: anagrams, mappings, prefixes, windows and word order."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

__all__ = [
    "is_anagram",
    "is_isomorphic",
    "longest_common_prefix",
    "character_replacement",
    "largest_odd_number",
    "remove_outer_parentheses",
    "reverse_words",
    "rotate_string",
    "number_of_substrings",
]


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t is a rearrangement of the characters of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether a one-to-one character mapping turns s into t."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest string that every given string starts with."""
    if not strs:
        raise ValueError("no strings given")
    prefix = strs[0]
    for s in strs:
        while not s.startswith(prefix):
            prefix = prefix[:-1]
    return prefix


def character_replacement(s: str, k: int) -> int:
    """Return the longest run that becomes one repeated character after at most k replacements."""
    counts: Counter[str] = Counter()
    left = best = max_freq = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        max_freq = max(max_freq, counts[ch])
        width = right - left + 1
        if width - max_freq <= k:
            best = max(best, width)
        else:
            counts[s[left]] -= 1
            left += 1
            max_freq = 0
    return best


def largest_odd_number(number: str) -> str:
    """Return the longest prefix of the digit string that ends in an odd digit, or ''."""
    return number.rstrip("02468")


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair of parentheses from each primitive balanced group."""
    kept = []
    depth = 0
    for ch in s:
        if ch == "(":
            if depth > 0:
                kept.append(ch)
            depth += 1
        else:
            depth -= 1
            if depth > 0:
                kept.append(ch)
    return "".join(kept)


def reverse_words(s: str) -> str:
    """Return the space-separated words in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether some left rotation of the non-empty s equals goal."""
    return len(s) == len(goal) and any(s[i:] + s[:i] == goal for i in range(len(s)))


def number_of_substrings(s: str) -> int:
    """Count the substrings that contain each of 'a', 'b' and 'c' at least once."""
    stray = set(s) - set("abc")
    if stray:
        raise ValueError(f"only 'a', 'b' and 'c' are allowed, got {sorted(stray)}")
    counts: Counter[str] = Counter()
    left = total = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        while all(counts[c] for c in "abc"):
            total += len(s) - right
            counts[s[left]] -= 1
            left += 1
    return total