# pipelines/build_dictionary.py
"""
Build the spell checker dictionary from a raw word list.

- Reads: .txt (one word per line) or .csv (one column of words, via pandas)
- Lowercases, strips, drops blanks/comments, deduplicates, sorts
- Backs up an existing output file (no accidental overwrite)

Usage:
    python pipelines/build_dictionary.py \
      --source data/raw/english_words.txt \
      --output data/words.txt

    # Frequency list exported as csv, letters only
    python pipelines/build_dictionary.py \
      --source data/raw/word_freq.csv --column word --alpha-only
"""
import argparse
import time
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from spellcheck.config import DICTIONARY_PATH


# ==== Helpers ====
def read_source(path: str, column: str = "word") -> List[str]:
    """Load raw words from txt/csv."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    if p.suffix == ".csv":
        df = pd.read_csv(p, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise ValueError(f"Column '{column}' not in {p} (columns: {list(df.columns)})")
        return df[column].tolist()

    if p.suffix in (".txt", ""):
        with open(p, "r", encoding="utf-8") as f:
            return f.read().splitlines()

    raise ValueError(f"Unsupported extension: {p.suffix}")


def normalize_words(words: Iterable[str], alpha_only: bool = False) -> List[str]:
    """Lowercased, deduplicated, sorted words; blanks and '#' comments dropped."""
    out = set()
    for w in words:
        w = str(w).strip().lower()
        if not w or w.startswith("#"):
            continue
        if alpha_only and not w.isalpha():
            continue
        out.add(w)
    return sorted(out)


def backup_if_exists(path: Path):
    """Make a timestamped backup of an existing dictionary."""
    if path.exists():
        ts = time.strftime("%Y%m%d_%H%M%S")
        path.rename(path.with_suffix(path.suffix + f".bak.{ts}"))
        print(f"✅ Backed up {path}")


# ==== Main ====
def main(args):
    raw = read_source(args.source, column=args.column)
    print(f"📦 Loaded {len(raw):,} raw entries from {args.source}")

    words = normalize_words(raw, alpha_only=args.alpha_only)
    print(f"🔤 {len(words):,} unique words after normalization")

    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    backup_if_exists(out)
    with open(out, "w", encoding="utf-8") as f:
        f.write("\n".join(words) + "\n")
    print(f"💾 Saved dictionary → {out}")


# ==== CLI ====
if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--source", type=str, required=True)
    parser.add_argument("--output", type=str, default=DICTIONARY_PATH)
    parser.add_argument("--column", type=str, default="word", help="CSV column holding the words")
    parser.add_argument("--alpha-only", action="store_true", help="Keep only purely alphabetic words")
    args = parser.parse_args()
    main(args)
