"""Store file: YAML codec and the read/write gateway.

The store is the single source of truth. It is read in full on every
operation and replaced in full (temp file + rename) on every change.
"""

from recents.store.codec import RecordSet, decode, encode, repair
from recents.store.gateway import StoreFile

__all__ = ["RecordSet", "StoreFile", "decode", "encode", "repair"]
