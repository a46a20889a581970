"""
Download a Wordle word list and write a clean copy to disk.

What it does:
- Downloads the newline-separated list (default: the public valid-words gist).
- Lowercases, keeps only a–z words of the requested length.
- De-duplicates (first occurrence wins) and writes one word per line.

Usage:
    python -m script.fetch_words --out words.txt
    # alphabetically sorted:
    python -m script.fetch_words --sort --out words.txt
"""

import argparse

from wordlebot.datasets import DICTIONARY_URL, WORD_LENGTH, fetch_words, write_words


def clean_words(lines, length):
    seen = set()
    out = []
    for raw in lines:
        w = raw.strip().lower()
        if len(w) == length and w.isascii() and w.isalpha() and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Download and clean a Wordle word list")
    ap.add_argument("--url", default=DICTIONARY_URL)
    ap.add_argument("--out", default="words.txt")
    ap.add_argument("--length", type=int, default=WORD_LENGTH)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "download order")
    args = ap.parse_args()

    words = clean_words(fetch_words(args.url), args.length)
    if args.sort:
        words = sorted(words)

    write_words(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
