#!/usr/bin/env python3
from pathlib import Path
from typing import List, Optional, Sequence

from fixture_io import (
    StrPath,
    copy_n,
    fail,
    parse_args,
    report_sizes,
    total_size,
    validate_args,
)

RANDOM_FILES = ("base.bin", "overlay1.bin", "overlay2.bin")
MULTIPLIER = 1024 * 1024  # pages per file


def generate(dirpath: StrPath, page_size: int, source: StrPath) -> List[Path]:
    """
    Generate the large base/overlay fixtures, each page_size * 1024 * 1024 random bytes

    Args:
        dirpath: output dir path
        page_size: page size in bytes
        source: random byte source
    """
    total = total_size(page_size, MULTIPLIER)
    report_sizes(page_size, total)

    created = []
    for name in RANDOM_FILES:
        print(f"creating '{name}'")
        path = Path(dirpath) / name
        copy_n(path, source, total)
        created.append(path)
    return created


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args("Generate base/overlay fixtures of 1Mi pages of random bytes", argv)

    err = validate_args(args)
    if err:
        return fail(err)

    try:
        generate(args.dirpath, args.page_size, args.source)
    except OSError as e:
        return fail(str(e))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
