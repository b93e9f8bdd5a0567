from __future__ import annotations

"""
Generated Module Persistence.

Writes the finished module in one step: the text goes to a temporary file
next to the destination, which then replaces the destination atomically.
Readers never observe a half-written module.
"""

import os
import tempfile

from assetlink.infra.fs import ensure_parent_dir

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_output(output_path: str, code: str) -> str:
    """
    Atomically replace the output file with the generated code.

    Args:
        output_path: Destination file.
        code: Complete module text.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the directory cannot be created or written.
    """
    target = os.path.abspath(output_path)
    ensure_parent_dir(target)

    fd, tmp_path = tempfile.mkstemp(
        prefix=".assetlink-", suffix=".tmp", dir=os.path.dirname(target)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as out:
            out.write(code)
        os.replace(tmp_path, target)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    return target


def output_is_current(output_path: str, code: str) -> bool:
    """
    Check whether the destination already holds exactly this code.

    Bytes are compared so that an existing file in another encoding simply
    counts as stale.
    """
    if not os.path.isfile(output_path):
        return False
    with open(output_path, "rb") as f:
        return f.read() == code.encode("utf-8")
