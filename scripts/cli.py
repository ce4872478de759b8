"""CLI entry point for segkit (graphemes, words, sentences, segment, property, export-table)."""
import argparse
import json
import logging
import sys
from pathlib import Path

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))

from segkit.config import LOG_LEVELS, MODES, OUTPUTS, load_config
from segkit.errors import DecodeError
from segkit.segment.grapheme import segment_graphemes
from segkit.segment.sentence import segment_sentences
from segkit.segment.word import segment_words, is_word
from segkit.unicode.properties import (
    RULES_VERSION,
    UNICODE_VERSION,
    iter_ranges,
    property_of,
    sentence_property_of,
    word_property_of,
)

logger = logging.getLogger("segkit.cli")

SEGMENTERS = {
    "graphemes": segment_graphemes,
    "words": segment_words,
    "sentences": segment_sentences,
}


def _read_input(path: str | None, as_bytes: bool, encoding: str):
    if path in (None, "-"):
        data = sys.stdin.buffer.read()
    else:
        data = Path(path).read_bytes()
    if as_bytes:
        return data
    return data.decode(encoding)


def _render(segmentation, output: str, words_only: bool) -> str:
    rows = []
    for span, chunk in zip(segmentation, segmentation.texts()):
        if words_only and not is_word(chunk):
            continue
        if isinstance(chunk, bytes):
            chunk = chunk.decode("utf-8")
        rows.append((span, chunk))
    if output == "json":
        return json.dumps([{"start": s.start, "end": s.end, "text": t} for s, t in rows], ensure_ascii=False)
    if output == "text":
        return "\n".join(t for _, t in rows)
    return "\n".join(f"{s.start}\t{s.end}\t{t!r}" for s, t in rows)


def cmd_segment(args, cfg):
    try:
        data = _read_input(args.input, args.bytes, cfg["encoding"])
    except UnicodeDecodeError as e:
        logger.error("Input is not valid %s at offset %d: %s", cfg["encoding"], e.start, e.reason)
        return 1
    mode = args.cmd if args.cmd in SEGMENTERS else (args.mode or cfg["mode"])
    try:
        segmentation = SEGMENTERS[mode](data)
    except DecodeError as e:
        logger.error("%s", e)
        return 1
    words_only = mode == "words" and (getattr(args, "words_only", False) or cfg["words_only"])
    out = _render(segmentation, args.format or cfg["output"], words_only)
    if out:
        print(out)
    return 0


def _parse_code_point(token: str) -> int:
    t = token.upper()
    if t.startswith("U+"):
        return int(t[2:], 16)
    if t.startswith("0X"):
        return int(t[2:], 16)
    if len(token) == 1:
        return ord(token)
    return int(token, 16)


def cmd_property(args, cfg):
    for token in args.code_points:
        try:
            cp = _parse_code_point(token)
        except ValueError:
            logger.error("Not a code point: %s", token)
            return 1
        print(
            f"U+{cp:04X}\tGCB={property_of(cp).value}"
            f"\tWB={word_property_of(cp).value}\tSB={sentence_property_of(cp).value}"
        )
    return 0


def cmd_export_table(args, cfg):
    lines = [
        f"# {args.kind} break property table, Unicode {UNICODE_VERSION} data, UAX #29 rules revision {RULES_VERSION}",
        "",
    ]
    for start, end, value in iter_ranges(args.kind):
        cps = f"{start:04X}" if end - start == 1 else f"{start:04X}..{end - 1:04X}"
        lines.append(f"{cps:<14}; {value.value}")
    text = "\n".join(lines) + "\n"
    if args.output:
        Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info("Wrote %d ranges to %s", len(lines) - 2, args.output)
    else:
        sys.stdout.write(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="segkit", description="Unicode text segmentation (UAX #29)")
    p.add_argument("--config", default=None, help="YAML config file")
    p.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS)
    sub = p.add_subparsers(dest="cmd", required=True)
    for mode in MODES:
        seg_p = sub.add_parser(mode, help=f"Split input into {mode}")
        seg_p.add_argument("input", nargs="?", default=None, help="File to read (default: stdin)")
        seg_p.add_argument("--bytes", action="store_true", help="Report UTF-8 byte offsets")
        seg_p.add_argument("--format", choices=OUTPUTS, default=None)
        if mode == "words":
            seg_p.add_argument("--words-only", action="store_true", help="Drop spaces and punctuation")
        seg_p.set_defaults(func=cmd_segment)
    any_p = sub.add_parser("segment", help="Split input using the configured mode")
    any_p.add_argument("input", nargs="?", default=None, help="File to read (default: stdin)")
    any_p.add_argument("--mode", choices=MODES, default=None)
    any_p.add_argument("--bytes", action="store_true", help="Report UTF-8 byte offsets")
    any_p.add_argument("--format", choices=OUTPUTS, default=None)
    any_p.add_argument("--words-only", action="store_true", help="Drop spaces and punctuation (words mode)")
    any_p.set_defaults(func=cmd_segment)
    prop_p = sub.add_parser("property", help="Show break properties of code points")
    prop_p.add_argument("code_points", nargs="+", help="U+XXXX, 0xXXXX, hex, or a single character")
    prop_p.set_defaults(func=cmd_property)
    exp_p = sub.add_parser("export-table", help="Write a property table in UCD range format")
    exp_p.add_argument("--kind", choices=("grapheme", "word", "sentence", "conjunct"), default="grapheme")
    exp_p.add_argument("--output", "-o", default=None)
    exp_p.set_defaults(func=cmd_export_table)
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    cfg = load_config(args.config)
    logging.basicConfig(
        level=args.log_level or cfg["log_level"],
        format="%(levelname)s: %(message)s",
    )
    return args.func(args, cfg) or 0


if __name__ == "__main__":
    sys.exit(main())
