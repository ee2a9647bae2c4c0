# ======================================================
# run_demo.py
# ======================================================
import argparse
import glob
import logging
import os

from termindex.DocumentManager import DocumentManager
from termindex.Indexer import InvertedIndex
from termindex.Query import QueryProcessor
from termindex.TermTable import TABLE_SIZE

SAMPLE_DIR = os.path.join("data", "sample_docs")


def build_index(paths, capacity=TABLE_SIZE, max_load=None):
    print("=== Building the inverted index ===")

    index = InvertedIndex(capacity=capacity, max_load=max_load)
    manager = DocumentManager()
    manager.build(index, paths)

    print(f"Indexed {manager.N - len(manager.failed)} of {manager.N} documents "
          f"({manager.total_tokens()} tokens).")
    print(f"Vocabulary size: {len(index)} unique terms.")
    if manager.skipped_tokens:
        print(f"Skipped {manager.skipped_tokens} over-long tokens.")
    if index.dropped:
        print(f"Dropped {index.dropped} tokens (out of memory).")
    return index


def print_stats(index):
    stats = index.table.stats()
    print("=== Term table ===")
    for key, value in stats.items():
        if isinstance(value, float):
            print(f"{key:>14}: {value:.3f}")
        else:
            print(f"{key:>14}: {value}")


def interactive(qp):
    while True:
        try:
            query = input("\nSearch term ('quit' to exit): ").strip()
        except EOFError:
            break
        if query == "quit":
            break
        if not query:
            continue
        print(qp.render(query))


def main(args):
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    paths = args.files or sorted(glob.glob(os.path.join(SAMPLE_DIR, "*.txt")))
    # If no documents are found, warn the user.
    if not paths:
        print(f"No documents given and none found in {SAMPLE_DIR}.")
        return 1

    index = build_index(paths, capacity=args.capacity, max_load=args.max_load)
    if args.stats:
        print_stats(index)

    interactive(QueryProcessor(index, sort=args.sort))
    return 0


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Build an in-memory inverted index and search it.")
    ap.add_argument("files", nargs="*", help=f"documents to index (default: {SAMPLE_DIR}/*.txt)")
    ap.add_argument("--sort", action="store_true", help="order results by frequency, highest first")
    ap.add_argument("--capacity", type=int, default=TABLE_SIZE, help="number of hash buckets")
    ap.add_argument("--max-load", type=float, default=None, help="grow the table past this many terms per bucket")
    ap.add_argument("--stats", action="store_true", help="print bucket statistics after building")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    raise SystemExit(main(ap.parse_args()))
