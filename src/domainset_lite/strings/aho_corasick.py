"""Aho-Corasick automaton for blacklist keyword matching.

A DOMAIN-KEYWORD rule blocks every host whose name contains the keyword
anywhere ("ads" blocks "fast-ads-cdn.com"). Testing each of several
hundred keywords with `in` costs O(keywords * len(domain)) per domain;
across hundreds of thousands of domains that dominates the build.

The classic Aho-Corasick construction (1975) answers "does this text
contain any keyword" in a single left-to-right pass:

    1. Build the goto trie: insert each keyword character by character.
    2. Compute failure links (BFS from root): when the next character
       has no goto edge, the failure link points to the longest proper
       suffix of the current path that is also a path from the root.
    3. Propagate matches: a state matches if its own path is a keyword
       or its failure target matches. This catches keywords that are
       suffixes of longer ones ("b" inside "ab").

Unlike the segment-level variant this started from, states here are
per character, since keywords match inside labels and across dots.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from domainset_lite.domain.types import Keyword


@dataclass(slots=True)
class ACNode:
    """A state in the automaton.

    match holds a keyword recognised at this state, either its own or
    one inherited through the failure chain. None for non-match states.
    """
    children: dict[str, ACNode] = field(default_factory=dict)
    fail: ACNode | None = None
    match: Keyword | None = None
    depth: int = 0


class KeywordAutomaton:
    """Multi-keyword substring search.

    Usage:
        ac = KeywordAutomaton.from_keywords(["track", "ads"])
        ac.search("fast-ads-cdn.com")       # True
        ac.first_match("fast-ads-cdn.com")  # "ads"

    Or incrementally:
        ac = KeywordAutomaton()
        ac.add_keyword("track")
        ac.build()  # MUST call before searching

    Calling add_keyword() after build() invalidates the automaton; you
    must call build() again.
    """

    def __init__(self) -> None:
        self._root = ACNode()
        self._built = False
        self._keyword_count = 0

    @classmethod
    def from_keywords(cls, keywords: Iterable[Keyword]) -> KeywordAutomaton:
        ac = cls()
        for keyword in keywords:
            ac.add_keyword(keyword)
        ac.build()
        return ac

    @property
    def keyword_count(self) -> int:
        return self._keyword_count

    def add_keyword(self, keyword: Keyword) -> None:
        """Insert a keyword into the goto trie.

        The empty string would match every input, so it is rejected.
        Adding the same keyword twice is a no-op.
        """
        if not keyword:
            raise ValueError("keyword must be a non-empty string")
        node = self._root
        for i, ch in enumerate(keyword):
            child = node.children.get(ch)
            if child is None:
                child = ACNode(depth=i + 1)
                node.children[ch] = child
            node = child
        if node.match != keyword:
            node.match = keyword
            self._keyword_count += 1
        self._built = False

    def build(self) -> None:
        """Compute failure links and propagate match markers.

        Failure link computation (BFS):
        - Root's children all have fail -> root.
        - For each deeper node, follow the parent's failure link and
          look for a child on the same character. If not found, follow
          that node's failure link, and repeat until root.

        Because BFS visits shallower states first, a node's failure
        target is finalized (including its match marker) before the
        node itself inherits from it.
        """
        root = self._root
        root.fail = root
        queue: deque[ACNode] = deque()

        # Depth-1 nodes: failure link -> root
        for child in root.children.values():
            child.fail = root
            queue.append(child)

        while queue:
            current = queue.popleft()
            for ch, child in current.children.items():
                fallback = current.fail
                while fallback is not root and ch not in fallback.children:
                    fallback = fallback.fail  # type: ignore[assignment]
                target = fallback.children.get(ch, root)
                child.fail = root if target is child else target
                if child.match is None:
                    child.match = child.fail.match
                queue.append(child)

        self._built = True

    def first_match(self, text: str) -> Keyword | None:
        """Return the first keyword found scanning `text`, or None.

        Never re-reads input: on a missing goto edge the scan follows
        failure links, so the cost is O(len(text)) regardless of how
        many keywords were added.
        """
        if not self._built:
            raise RuntimeError("Must call build() before search()")

        root = self._root
        node = root
        for ch in text:
            while node is not root and ch not in node.children:
                node = node.fail  # type: ignore[assignment]
            node = node.children.get(ch, root)
            if node.match is not None:
                return node.match
        return None

    def search(self, text: str) -> bool:
        """True if any keyword occurs in `text` as a contiguous substring."""
        return self.first_match(text) is not None

    def node_count(self) -> int:
        """Count total states in the automaton, root included."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count
