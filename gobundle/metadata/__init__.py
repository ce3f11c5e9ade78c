from .extractor import MetadataExtractor
from .header import FileHeader, HeaderParser, tokenize_header

__all__ = ["FileHeader", "HeaderParser", "MetadataExtractor", "tokenize_header"]
