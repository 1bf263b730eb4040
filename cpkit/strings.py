"""String algorithms: prefix function, Z-function, Manacher and a counting trie."""

from __future__ import annotations


def prefix_function(s: str) -> list[int]:
    """Return pi where pi[i] is the longest proper border of s[:i + 1]."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def z_function(s: str) -> list[int]:
    """Return z where z[i] is the longest common prefix of s and s[i:] (z[0] is 0)."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def manacher(s: str) -> tuple[list[int], list[int]]:
    """Return (even, odd) palindrome radii for every position of s.

    odd[i] = k means s[i - k : i + k + 1] is the longest odd palindrome centred at i.
    even[i] = k means s[i - k + 1 : i + k + 1] is the longest even palindrome
    centred between i and i + 1.
    """
    n = len(s)
    radii = ([0] * n, [0] * n)
    for idx in (1, 0):
        rad = radii[idx]
        left = right = -1
        for i in range(n - 1):
            if i > right:
                left = right = i
            else:
                k = min(right - i, rad[left + right - i])
                left, right = i - k, i + k
            while left - idx >= 0 and right + 1 < n and s[left - idx] == s[right + 1]:
                left -= 1
                right += 1
            rad[i] = right - i
    return radii[0], radii[1]


class Trie:
    """Prefix tree counting how many added words start with a given prefix."""

    def __init__(self) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._counts: list[int] = [0]

    def add(self, word: str) -> None:
        """Add one occurrence of word."""
        node = 0
        self._counts[node] += 1
        for ch in word:
            nxt = self._children[node].get(ch)
            if nxt is None:
                nxt = len(self._counts)
                self._children[node][ch] = nxt
                self._children.append({})
                self._counts.append(0)
            node = nxt
            self._counts[node] += 1

    def count_prefix(self, prefix: str) -> int:
        """Return the number of added words that start with prefix."""
        node = 0
        for ch in prefix:
            nxt = self._children[node].get(ch)
            if nxt is None:
                return 0
            node = nxt
        return self._counts[node]