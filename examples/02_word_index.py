from __future__ import annotations

from kungfu import Error, Ok

import lazyseq as ls
from lazyseq import flow, setup_logger

DOCUMENTS = [
    "lazy sequences compose",
    "",
    "filters buffer one element ahead",
    "flatten skips empty inner sequences",
]


def count_words(index: dict[str, int], word: str) -> dict[str, int]:
    index[word] = index.get(word, 0) + 1
    return index


def main() -> None:
    setup_logger(level="DEBUG")
    print("\n== 02_word_index: flat_map + reduce ==")

    words = flow(DOCUMENTS).flat_map(str.split).filter(lambda w: len(w) > 4)
    print(words.reduce(count_words, initial={}))

    # Non-raising pull
    cursor = words.sequence()
    while True:
        match cursor.try_next():
            case Ok(word):
                print(f"word: {word}")
            case Error(err):
                print(f"done: {err}")
                break

    # Removal is only defined for array-backed cursors over a mutable list
    backlog = ["keep", "drop", "keep"]
    seq = ls.array_seq(backlog)
    for word in seq:
        if word == "drop":
            seq.remove()
    print(backlog)


if __name__ == "__main__":
    main()
