"""
codec.py — Packing four bytes into one 32-bit gene and back.

Layout is big-endian: fields[0] lands in bits 24-31, fields[3] in bits 0-7.
Every 32-bit value is a valid gene, so pack/unpack never fail on
in-range input.
"""

import numpy as np

from definitions import FIELD_BITMASKS, FIELD_SHIFTS, BYTE_MAX, GENE_MAX, GENE_BITS


def _is_integer(value):
    # bool is an int subclass but never a field or gene value
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _check_fields(fields):
    if len(fields) != len(FIELD_SHIFTS):
        raise ValueError(f"expected {len(FIELD_SHIFTS)} fields, got {len(fields)}")
    for byte in fields:
        if not _is_integer(byte) or not 0 <= byte <= BYTE_MAX:
            raise ValueError(f"not a byte: {byte!r}")


def _check_value(value):
    if not _is_integer(value) or not 0 <= value <= GENE_MAX:
        raise ValueError(f"not a 32-bit value: {value!r}")


def pack(fields) -> int:
    """Pack 4 bytes into a 32-bit integer"""
    _check_fields(fields)
    packed = 0
    for byte, shift in zip(fields, FIELD_SHIFTS):
        packed |= int(byte) << shift
    return packed


def unpack(value: int) -> tuple[int, int, int, int]:
    """Decode a 32-bit integer into its 4 bytes"""
    _check_value(value)
    value = int(value)
    return tuple((value >> shift) & BYTE_MAX for shift in FIELD_SHIFTS)


def split_into_fields(gene: int, masks=FIELD_BITMASKS) -> tuple[int, int, int, int]:
    """Same as unpack, but isolating each field with its bitmask first"""
    _check_value(gene)
    gene = int(gene)
    return tuple((gene & mask) >> shift for mask, shift in zip(masks, FIELD_SHIFTS))


def to_bytes(value: int) -> bytes:
    # Wire form: source, weight, bias, sink
    _check_value(value)
    return value.to_bytes(4, "big")


def from_bytes(data) -> int:
    if len(data) != 4:
        raise ValueError(f"expected 4 bytes, got {len(data)}")
    return int.from_bytes(bytes(data), "big")


def format_bits(value: int) -> str:
    """Zero-padded binary string, most significant bit first"""
    _check_value(value)
    return f"{value:0{GENE_BITS}b}"
