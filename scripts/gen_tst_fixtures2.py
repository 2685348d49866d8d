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
    write_alternating_pages,
)

RANDOM_FILES = ("base.bin", "overlay1.bin", "overlay2.bin")
PATTERN_FILE = "overlay3.bin"
MULTIPLIER = 1024  # pages per file


def generate(dirpath: StrPath, page_size: int, source: StrPath) -> List[Path]:
    total = total_size(page_size, MULTIPLIER)
    report_sizes(page_size, total)

    created = []
    for name in RANDOM_FILES:
        print(f"creating '{name}'")
        path = Path(dirpath) / name
        copy_n(path, source, total)
        created.append(path)

    # zero page first, then 0xFF, alternating
    print(f"creating '{PATTERN_FILE}'")
    path = Path(dirpath) / PATTERN_FILE
    write_alternating_pages(path, page_size, total)
    created.append(path)
    return created


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args("Generate small base/overlay fixtures plus a zero/0xFF page pattern", argv)

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
