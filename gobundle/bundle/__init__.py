from .assembler import FILE_MARKER, assemble_bundle, encode_metadata
from .writer import write_bundle

__all__ = ["FILE_MARKER", "assemble_bundle", "encode_metadata", "write_bundle"]
