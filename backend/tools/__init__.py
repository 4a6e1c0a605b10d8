from .paths import resolve_path
from .files import read_entry, list_directory, entry_for, iso_mtime, collation_key

__all__ = ["resolve_path", "read_entry", "list_directory", "entry_for", "iso_mtime", "collation_key"]
