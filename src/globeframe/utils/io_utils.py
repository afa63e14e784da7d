# SPDX-License-Identifier: Apache-2.0
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator


@contextmanager
def open_output(path_or_dash: str) -> Iterator[BinaryIO]:
    """Yield a writable binary file-like for a path or '-' (stdout).

    Stdout is never closed. For real paths, missing parent directories are
    created before the file is opened.
    """
    if path_or_dash == "-":
        yield sys.stdout.buffer
        sys.stdout.buffer.flush()
        return
    out_path = Path(path_or_dash)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("wb") as f:
        yield f


def write_payload(payload: bytes, path_or_dash: str = "-") -> None:
    with open_output(path_or_dash) as f:
        f.write(payload)
