"""
Contract & Serialization Module

Текстовый формат матриц и JSON Schema контракт matrix payload.
"""

from .text_codec import (
    MIN_SIGNIFICANT_DIGITS,
    TextCodec,
    TextCodecConfig,
    dumps,
    load_txt,
    loads,
    save_txt,
)
from .validators import (
    ContractValidator,
    MatrixValidator,
    SchemaLoader,
    matrix_from_payload,
    matrix_to_payload,
    validate_matrix_payload,
)

__all__ = [
    # Text codec
    "MIN_SIGNIFICANT_DIGITS",
    "TextCodec",
    "TextCodecConfig",
    "dumps",
    "loads",
    "save_txt",
    "load_txt",
    # JSON contracts
    "SchemaLoader",
    "ContractValidator",
    "MatrixValidator",
    "validate_matrix_payload",
    "matrix_to_payload",
    "matrix_from_payload",
]
