#!/usr/bin/env python3
"""
Walk word boundaries of a sentence and print why each boundary occurred.

Shows:
- stepping a BreakIterator forward with move_next()
- reading the rule status of every boundary
- one-shot splitting with split() and get_word_boundaries()

Usage:
    python examples/boundary_walk_demo.py
"""

import logging

from icubreak import (
    DONE,
    BreakIterator,
    BreakType,
    WordBreak,
    get_word_boundaries,
    split,
)


def describe(status: int) -> str:
    for tag in (WordBreak.IDEO, WordBreak.KANA, WordBreak.LETTER, WordBreak.NUMBER):
        if status >= tag:
            return tag.name.lower()
    return "none"


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    text = "Good-day, kind sir! It costs 3.50 today."

    with BreakIterator.create_word_instance("en-US") as bi:
        bi.set_text(text)
        start = bi.current
        end = bi.move_next()
        while end != DONE:
            print(f"{start:3d}..{end:<3d} {text[start:end]!r:12} {describe(bi.get_rule_status())}")
            start = end
            end = bi.move_next()

    print()
    print("Words:    ", list(split(BreakType.WORD, "en-US", text)))
    print("Sentences:", list(split(BreakType.SENTENCE, "en-US", text)))
    print("Spans:    ", [(b.start, b.end) for b in get_word_boundaries("en-US", text, False)])


if __name__ == "__main__":
    main()
