import os
import stat
import asyncio
import logging
import unicodedata
from datetime import datetime, timezone
from typing import List, Optional, Union

from errors import EntryNotFoundError, EntryReadError, UnsupportedEntryTypeError
from models import DirectoryEntry, DirectoryListing, FileContent


def iso_mtime(st: os.stat_result) -> str:
    # same shape as JS Date.toISOString(): millisecond precision, trailing Z
    ts = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def collation_key(name: str):
    """
    Root-locale style ordering: accents and case are ignored first, then
    unaccented before accented, then lowercase before uppercase.
    """
    folded = unicodedata.normalize("NFD", name.casefold())
    base = "".join(c for c in folded if not unicodedata.combining(c))
    return (base, folded, name.swapcase())


def _sort_key(entry: DirectoryEntry):
    return (entry.type != "directory", collation_key(entry.name))


async def _stat(path: str) -> os.stat_result:
    try:
        return await asyncio.to_thread(os.stat, path)
    except FileNotFoundError as e:
        raise EntryNotFoundError(path) from e


async def entry_for(parent: str, name: str, logger: logging.Logger) -> Optional[DirectoryEntry]:
    """Stat one child. Returns None (and logs) when its metadata can't be read."""
    entry_path = os.path.join(parent, name)
    try:
        st = await asyncio.to_thread(os.stat, entry_path)
    except OSError as e:
        logger.error(f"Error getting stats for {entry_path}: {e}")
        return None
    is_dir = stat.S_ISDIR(st.st_mode)
    return DirectoryEntry(
        name=name,
        type="directory" if is_dir else "file",
        size=st.st_size if stat.S_ISREG(st.st_mode) else None,
        modified=iso_mtime(st),
    )


async def list_directory(full_path: str, logger: logging.Logger) -> List[DirectoryEntry]:
    try:
        names = await asyncio.to_thread(os.listdir, full_path)
    except OSError as e:
        raise EntryReadError(f"Unable to read directory: {e}") from e

    entries = await asyncio.gather(*(entry_for(full_path, n, logger) for n in names))
    return sorted((e for e in entries if e is not None), key=_sort_key)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


async def read_entry(
    full_path: str, request_path: str, logger: logging.Logger
) -> Union[DirectoryListing, FileContent]:
    """
    Stat full_path and shape the response for it.
    Directories list their immediate children; regular files return their text.
    """
    st = await _stat(full_path)

    if stat.S_ISDIR(st.st_mode):
        contents = await list_directory(full_path, logger)
        return DirectoryListing(path=request_path, contents=contents)

    if stat.S_ISREG(st.st_mode):
        try:
            content = await asyncio.to_thread(_read_text, full_path)
        except FileNotFoundError as e:
            raise EntryNotFoundError(full_path) from e
        except OSError as e:
            raise EntryReadError(f"Unable to read file: {e}") from e
        return FileContent(
            path=request_path,
            size=st.st_size,
            modified=iso_mtime(st),
            content=content,
        )

    raise UnsupportedEntryTypeError(full_path)
