"""Command-line interface for samregion."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from . import __version__
from .optional import OptionalRegion
from .region import ReferenceNotFoundError, Region
from .scan import RegionParseError
from .string_region import StringRegion


def _add_parse_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "parse",
        help="Parse region strings and print their normalized fields",
    )
    p.add_argument("region", nargs="+", help="Region(s) (chr1, chr1:100-200, 'chr1 100 200')")
    p.add_argument("--prefix", default=None, help="Contig prefix to normalize (e.g. chr)")
    p.add_argument(
        "--optional",
        action="store_true",
        help="Allow missing start/end bounds (chr1, chr1:100)",
    )


def _add_bed_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "bed",
        help="Convert 1-based samtools-style regions to BED intervals",
    )
    p.add_argument("region", nargs="*", help="Region(s) to convert")
    p.add_argument(
        "--regions-file",
        help="File with one 1-based region per line (chr1:100-200 or 'chr1 100 200')",
    )
    p.add_argument("--in-bed", help="BED file of 0-based intervals, written unshifted")
    p.add_argument("--prefix", default=None, help="Contig prefix to normalize (e.g. chr)")
    p.add_argument("--pad", type=int, default=0, help="Pad each region by INT bp [default: 0]")
    p.add_argument("--out-bed", default="-", help="Output BED file [default: stdout]")


def _add_resolve_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "resolve",
        help="Resolve regions to reference ids using a BAM header",
    )
    p.add_argument("--bam", required=True, help="Input BAM file")
    p.add_argument("region", nargs="+", help="Region(s) to resolve")


# ── Helpers ──────────────────────────────────────────────────────────────────


def _parse_string_region(text: str, prefix: str | None) -> StringRegion:
    if prefix is None:
        return StringRegion.parse(text)
    return StringRegion.parse_with_prefix(text, prefix)


def _read_region_lines(fp: TextIO) -> list[str]:
    lines = []
    for line in fp:
        line = line.strip()
        if line and not line.startswith("#"):
            lines.append(line)
    return lines


def _fmt(value: object) -> str:
    return "." if value is None else str(value)


# ── Subcommand handlers ─────────────────────────────────────────────────────


def _run_parse(args: argparse.Namespace) -> int:
    log = lambda msg: print(msg, file=sys.stderr)

    for text in args.region:
        try:
            if args.optional:
                if args.prefix is None:
                    opt = OptionalRegion.parse(text)
                else:
                    opt = OptionalRegion.parse_with_prefix(text, args.prefix)
                fields = (opt.uuid(), opt.path, opt.start, opt.end, opt.interval(), opt.inverted())
            else:
                reg = _parse_string_region(text, args.prefix)
                fields = (reg.uuid(), reg.path, reg.start, reg.end, reg.interval(), reg.inverted)
        except RegionParseError as exc:
            log(f"Error: {exc}")
            return 1
        print("\t".join(_fmt(f) for f in fields))

    return 0


def _run_bed(args: argparse.Namespace) -> int:
    from .bed import bed_read_regions, write_bed_regions

    log = lambda msg: print(msg, file=sys.stderr)

    texts = list(args.region)
    if args.regions_file:
        with open(args.regions_file) as fp:
            texts.extend(_read_region_lines(fp))
    if not texts and not args.in_bed:
        log("Error: No regions given")
        return 1
    if args.pad < 0:
        log(f"Error: --pad must be non-negative, got {args.pad}")
        return 1

    log(f"[bed] Regions: {len(texts)}")
    if args.in_bed:
        log(f"[bed] Input BED: {args.in_bed}")
    log(f"[bed] Pad: {args.pad}")
    log(f"[bed] Output BED: {args.out_bed}")

    try:
        regions = [_parse_string_region(t, args.prefix) for t in texts]
        bed_regions = []
        if args.in_bed:
            with open(args.in_bed) as fp:
                bed_regions = list(bed_read_regions(fp, prefix=args.prefix))

        out = sys.stdout if args.out_bed == "-" else open(args.out_bed, "w")
        try:
            n = write_bed_regions(out, regions, pad=args.pad)
            n += write_bed_regions(out, bed_regions, pad=args.pad, one_based=False)
        finally:
            if out is not sys.stdout:
                out.close()
    except (RegionParseError, ArithmeticError) as exc:
        log(f"Error: {exc}")
        return 1

    log(f"[bed] Done. Wrote {n} interval(s)")
    return 0


def _run_resolve(args: argparse.Namespace) -> int:
    from .resolve import header_resolver

    log = lambda msg: print(msg, file=sys.stderr)

    log(f"[resolve] BAM: {args.bam}")

    import pysam

    rows = []
    with pysam.AlignmentFile(args.bam, "rb") as bam:
        to_id = header_resolver(bam.header)
        for text in args.region:
            try:
                region = Region.convert(StringRegion.parse(text), to_id)
            except (RegionParseError, ReferenceNotFoundError) as exc:
                log(f"Error: {exc}")
                return 1
            rows.append((text, region))

    for text, region in rows:
        print(f"{text}\t{region.ref_id}\t{region.start}\t{region.end}\t{region.length}")

    return 0


# ── Entry point ──────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="samregion",
        description=f"samregion v{__version__} — Genomic region parsing and conversion",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"samregion v{__version__}"
    )

    subparsers = parser.add_subparsers(dest="command")
    _add_parse_parser(subparsers)
    _add_bed_parser(subparsers)
    _add_resolve_parser(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    dispatch = {
        "parse": _run_parse,
        "bed": _run_bed,
        "resolve": _run_resolve,
    }

    sys.exit(dispatch[args.command](args))


if __name__ == "__main__":
    main()
