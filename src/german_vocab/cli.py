"""Command-line interface for the German vocabulary codec."""

import argparse
import logging
import sys
from pathlib import Path

from german_vocab.codec import CodecError, compress, decompress
from german_vocab.db import (
    DEFAULT_DB_PATH,
    count_by_type,
    export_corpus,
    get_connection,
    get_engine,
    init_db,
    save_words,
)
from german_vocab.enums import WordType
from german_vocab.lookup import build_lookup_tables
from german_vocab.models import WordRecord
from german_vocab.records import dump_words, load_words
from german_vocab.tagging import DEFAULT_TAG_API, find_vocabulary
from german_vocab.validation import validate_corpus

DEFAULT_WORDS_PATH = Path("data/words.json")
DEFAULT_CORPUS_PATH = Path("data/words.txt")


def _read_corpus(path: Path) -> list[WordRecord]:
    return decompress(path.read_text(encoding="utf-8"))


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def cmd_compress(args: argparse.Namespace) -> int:
    """Compress a JSON vocabulary file into a corpus file."""
    input_path = Path(args.input)
    output_path = Path(args.output)

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        words = load_words(input_path)
    except (CodecError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    compressed = compress(words)
    _write_text(output_path, compressed)

    original_size = input_path.stat().st_size
    compressed_size = output_path.stat().st_size
    print(f"Compressed {len(words):,} words: {input_path} -> {output_path}")
    if original_size > 0:
        ratio = compressed_size / original_size * 100
        print(f"  Size: {original_size:,} -> {compressed_size:,} bytes ({ratio:.1f}%)")
    return 0


def cmd_decompress(args: argparse.Namespace) -> int:
    """Decompress a corpus file into a JSON vocabulary file."""
    input_path = Path(args.input)
    output_path = Path(args.output)

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        words = _read_corpus(input_path)
    except CodecError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    count = dump_words(words, output_path)
    print(f"Decompressed {count:,} words: {input_path} -> {output_path}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate every word of a JSON vocabulary file or a corpus file."""
    input_path = Path(args.input)

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        words = _read_corpus(input_path) if args.compressed else load_words(input_path)
    except (CodecError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = validate_corpus(words)
    print(report.summary(verbose=args.verbose))
    return 0 if report.all_passed else 1


def cmd_import_json(args: argparse.Namespace) -> int:
    """Import a JSON vocabulary file into the database."""
    input_path = Path(args.input)
    db_path = Path(args.database)

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        words = load_words(input_path)
    except (CodecError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Initializing database: {db_path}")
    init_db(get_engine(db_path))

    with get_connection(db_path) as conn:
        count = save_words(conn, words)

    print(f"Imported {count:,} words from {input_path}")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Export the database as a compressed corpus file."""
    db_path = Path(args.database)
    output_path = Path(args.output)

    if not db_path.exists():
        print(f"Error: Database not found: {db_path}", file=sys.stderr)
        print("Run 'import-json' first to create the database.", file=sys.stderr)
        return 1

    with get_connection(db_path) as conn:
        compressed = export_corpus(conn)

    _write_text(output_path, compressed)
    print(f"Exported corpus to {output_path} ({len(compressed.encode('utf-8')):,} bytes)")
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Print database statistics."""
    db_path = Path(args.database)

    if not db_path.exists():
        print(f"Error: Database not found: {db_path}", file=sys.stderr)
        return 1

    with get_connection(db_path) as conn:
        counts = count_by_type(conn)

    print("Words:")
    for word_type in WordType:
        print(f"  {word_type.plural}: {counts.get(word_type, 0):,}")
    print(f"  total: {sum(counts.values()):,}")
    return 0


def cmd_match(args: argparse.Namespace) -> int:
    """Tag a sentence and print the vocabulary word matched by each token."""
    corpus_path = Path(args.corpus)

    if not corpus_path.exists():
        print(f"Error: Corpus file not found: {corpus_path}", file=sys.stderr)
        return 1

    tables = build_lookup_tables(_read_corpus(corpus_path))
    matched = find_vocabulary(args.sentence, tables, api_url=args.api)

    for word in matched:
        if word is not None:
            print(f"  {word.type}: {word.lemma}")
    return 0


def _add_input(parser: argparse.ArgumentParser, default: Path, what: str) -> None:
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=str(default),
        help=f"Path to {what} (default: {default})",
    )


def _add_output(parser: argparse.ArgumentParser, default: Path, what: str) -> None:
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=str(default),
        help=f"Path to output {what} (default: {default})",
    )


def _add_database(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="german-vocab",
        description="Compress and manage a German vocabulary dataset",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging and detailed output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # compress subcommand
    compress_parser = subparsers.add_parser(
        "compress",
        help="Compress a JSON vocabulary file",
    )
    _add_input(compress_parser, DEFAULT_WORDS_PATH, "JSON or JSONL vocabulary file")
    _add_output(compress_parser, DEFAULT_CORPUS_PATH, "corpus file")
    compress_parser.set_defaults(func=cmd_compress)

    # decompress subcommand
    decompress_parser = subparsers.add_parser(
        "decompress",
        help="Decompress a corpus file to JSON",
    )
    _add_input(decompress_parser, DEFAULT_CORPUS_PATH, "corpus file")
    _add_output(decompress_parser, DEFAULT_WORDS_PATH, "JSON vocabulary file")
    decompress_parser.set_defaults(func=cmd_decompress)

    # validate subcommand
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate every word of a vocabulary file",
    )
    _add_input(validate_parser, DEFAULT_WORDS_PATH, "vocabulary file")
    validate_parser.add_argument(
        "--compressed",
        action="store_true",
        help="Input is a compressed corpus file rather than JSON",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # import-json subcommand
    import_parser = subparsers.add_parser(
        "import-json",
        help="Import a JSON vocabulary file into the database",
    )
    _add_input(import_parser, DEFAULT_WORDS_PATH, "JSON or JSONL vocabulary file")
    _add_database(import_parser)
    import_parser.set_defaults(func=cmd_import_json)

    # export subcommand
    export_parser = subparsers.add_parser(
        "export",
        help="Export the database as a compressed corpus",
    )
    _add_database(export_parser)
    _add_output(export_parser, DEFAULT_CORPUS_PATH, "corpus file")
    export_parser.set_defaults(func=cmd_export)

    # stats subcommand
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show database statistics",
    )
    _add_database(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    # match subcommand
    match_parser = subparsers.add_parser(
        "match",
        help="Match the words of a sentence against the vocabulary",
    )
    match_parser.add_argument("sentence", help="German sentence to tag")
    match_parser.add_argument(
        "-c",
        "--corpus",
        type=str,
        default=str(DEFAULT_CORPUS_PATH),
        help=f"Path to corpus file (default: {DEFAULT_CORPUS_PATH})",
    )
    match_parser.add_argument(
        "--api",
        type=str,
        default=DEFAULT_TAG_API,
        help=f"Tagging service URL (default: {DEFAULT_TAG_API})",
    )
    match_parser.set_defaults(func=cmd_match)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
