"""
Mappers between storage documents and application data.
"""

from .document_mapper import DocumentMapper

__all__ = [
    "DocumentMapper",
]
