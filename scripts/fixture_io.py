import argparse
import mmap
import os
import sys
from pathlib import Path
from typing import Final, Optional, Sequence, Union

import numpy as np


CHUNK: Final = 8 * 1024 * 1024  # 8 MiB
RANDOM_SOURCE: Final = "/dev/random"
FILE_MODE: Final = 0o777  # before umask

StrPath = Union[str, Path]


class ShortCopyError(OSError):
    """Source ran out before the requested number of bytes was copied."""


def get_page_size() -> int:
    return mmap.PAGESIZE


def total_size(page_size: int, multiplier: int) -> int:
    return page_size * multiplier


def report_sizes(page_size: int, total: int) -> None:
    print(f"using page size {page_size} bytes with total size {total} bytes ({total // 1024 // 1024} mB)")


def _create(path: str, flags: int) -> int:
    return os.open(path, flags, FILE_MODE)


def copy_n(path: StrPath, source: StrPath, count: int) -> int:
    """
    Create (or truncate) `path` and fill it with exactly `count` bytes from `source`

    Args:
        path: output file path
        source: byte source, e.g. /dev/random or a regular file
        count: number of bytes to copy

    Raises:
        ShortCopyError: source hit EOF before `count` bytes
        OSError: either file could not be opened, or a write failed

    A partially written output is left as is on failure.
    """
    written = 0
    with open(path, "wb", buffering=CHUNK, opener=_create) as out, open(source, "rb", buffering=0) as src:
        while written < count:
            # /dev/random may hand back fewer bytes than asked for
            block = src.read(min(CHUNK, count - written))
            if not block:
                raise ShortCopyError(
                    f"short copy into '{path}': source '{source}' gave {written} of {count} bytes"
                )
            out.write(block)
            written += len(block)
    return written


def write_alternating_pages(path: StrPath, page_size: int, total: int) -> int:
    """
    Write `total // page_size` pages, even pages all 0x00 and odd pages all 0xFF.

    A trailing partial page is dropped.
    """
    zero_page = np.zeros(page_size, dtype=np.uint8)
    ff_page = np.full(page_size, 0xFF, dtype=np.uint8)

    num_pages = total // page_size
    with open(path, "wb", opener=_create) as f:
        for i in range(num_pages):
            page = ff_page if i & 1 else zero_page
            page.tofile(f)
    return num_pages * page_size


def fail(msg: str) -> int:
    print(f"Error: {msg}", file=sys.stderr)
    return 1


def parse_args(description: str, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Optional overrides; with no arguments the fixed default run is returned
    (cwd, OS page size, /dev/random).
    """
    argv = sys.argv[1:] if argv is None else list(argv)

    if argv:
        parser = argparse.ArgumentParser(description=description)
        parser.add_argument('-d', '--dirpath', default=".", help='Output dir path (default: cwd)')
        parser.add_argument('-p', '--page-size', type=int, default=None, help='Page size in bytes (default: OS page size)')
        parser.add_argument('-s', '--source', default=RANDOM_SOURCE, help=f'Random byte source (default: {RANDOM_SOURCE})')
        args = parser.parse_args(argv)
    else:
        args = argparse.Namespace(
            dirpath=".",
            page_size=None,
            source=RANDOM_SOURCE,
        )

    if args.page_size is None:
        args.page_size = get_page_size()
    return args


def validate_args(args: argparse.Namespace) -> Optional[str]:
    if args.page_size <= 0:
        return "page size must be positive"
    if not Path(args.dirpath).is_dir():
        return f"output dir '{args.dirpath}' does not exist"
    return None
