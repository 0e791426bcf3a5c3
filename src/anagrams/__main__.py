from __future__ import annotations
import argparse, json, time
from datetime import datetime

from anagrams import Engine, AnagramError
from anagrams.config import DEFAULT_DSN, DEFAULT_WORDS_PATH
from anagrams.stats import elapsed_microseconds
from anagrams.validate import parse_date_range, validate_word


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Anagram dictionary CLI (Engine-backed)")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--build", action="store_true", help="(Re)load the dictionary from --words")
    g.add_argument("--load", action="store_true", help="Open the existing store (default)")

    p.add_argument("--db", default=DEFAULT_DSN, help="Store DSN: sqlite:///path or memory://")
    p.add_argument("--words", default=DEFAULT_WORDS_PATH, help="Newline-delimited word list")
    p.add_argument("--similar", default=None, help="Print anagrams of this word")
    p.add_argument("--add", default=None, help="Add this word to the dictionary")
    p.add_argument("--stats", action="store_true", help="Print usage statistics")
    p.add_argument("--from", dest="start", default=None, help="Stats window start (YYYY-MM-DDTHH:mm:ss)")
    p.add_argument("--to", dest="end", default=None, help="Stats window end (YYYY-MM-DDTHH:mm:ss)")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine()
    try:
        if args.build:
            if not args.words:
                p.error("--build requires --words")
            eng.build(args.words, db_dsn=args.db, verbose=args.verbose)
        else:
            eng.load(db_dsn=args.db, words_path=args.words, verbose=args.verbose)

        def emit(payload, text: str) -> None:
            print(json.dumps(payload, ensure_ascii=False) if args.json else text)

        def run_similar(word: str) -> None:
            t0 = time.perf_counter()
            observed_at = datetime.now()
            words = eng.similar(validate_word(word))
            eng.record(elapsed_microseconds(t0), observed_at)
            emit({"similar": words}, " ".join(words) if words else "(no anagrams)")

        status = 0
        try:
            if args.add is not None:
                word = validate_word(args.add)
                eng.add_word(word)
                emit({"added": word}, f"{word} added to the dictionary successfully!")
            if args.similar:
                run_similar(args.similar)
            if args.stats:
                start, end = parse_date_range(args.start, args.end)
                s = eng.statistics(start, end)
                emit(s.to_json(),
                     f"words={s.total_words} requests={s.total_requests} "
                     f"avg={s.avg_processing_time_us}us")
        except AnagramError as exc:
            emit(exc.to_dict(), f"{exc.type}: {exc.message}")
            status = 1

        if args.repl:
            print("Type a word (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                try:
                    run_similar(q)
                except AnagramError as exc:
                    print(f"{exc.type}: {exc.message}")

        return status
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
