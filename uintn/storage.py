#!/usr/bin/env python
# -*- coding: utf-8 -*-

import operator

import numpy as np

'''
Native unsigned storage kinds that back the fixed-width integer types, and the
wrapping arithmetic performed at each native width.
'''


class StorageKind:
    '''
    One native unsigned integer width. The 8- through 64-bit kinds hold numpy
    scalars and use numpy's own wraparound arithmetic. numpy has no 128-bit
    integer, so that kind holds a Python int and wraps by masking.
    '''

    def __init__(self, name, bits, dtype=None):
        self.name = name
        self.bits = bits
        self.dtype = dtype
        self.max_value = (1 << bits) - 1  # 0xFFF... or 0b111...

    def __repr__(self):
        return f"StorageKind({self.name})"

    def native(self, value):
        '''
        Convert an integer into a native value of this kind.
        :param value: Integer value, anything accepted by operator.index()
        '''
        int_value = operator.index(value)
        if not 0 <= int_value <= self.max_value:
            raise OverflowError(f"Value {int_value} out-of-range for {self.name}")
        if self.dtype is None:
            return int_value
        return self.dtype(int_value)

    def is_native(self, value):
        return self.dtype is not None and isinstance(value, self.dtype)

    def wrapping(self, op, a, b):
        '''
        Apply a binary operator to two native values of this kind, with the result
        wrapped modulo 2 ** bits as the hardware would.
        '''
        if self.dtype is None:
            return op(a, b) & self.max_value
        with np.errstate(over='ignore'):
            return op(a, b)


U8 = StorageKind('u8', 8, np.uint8)
U16 = StorageKind('u16', 16, np.uint16)
U32 = StorageKind('u32', 32, np.uint32)
U64 = StorageKind('u64', 64, np.uint64)
U128 = StorageKind('u128', 128)

STORAGE_KINDS = (U8, U16, U32, U64, U128)

_KINDS_BY_NAME = {kind.name: kind for kind in STORAGE_KINDS}
_KINDS_BY_NAME.update({f"uint{kind.bits}": kind for kind in STORAGE_KINDS})


def storage_kind(spec):
    '''
    Resolve a storage kind from a StorageKind, a name like 'u16' or 'uint16', a
    bit count, or a numpy unsigned scalar type.
    '''
    if isinstance(spec, StorageKind):
        return spec
    if isinstance(spec, str):
        try:
            return _KINDS_BY_NAME[spec.lower()]
        except KeyError:
            raise ValueError(f"Unknown storage kind '{spec}'") from None
    if isinstance(spec, int) and not isinstance(spec, bool):
        for kind in STORAGE_KINDS:
            if kind.bits == spec:
                return kind
        raise ValueError(f"No {spec:,d}-bit storage kind")
    try:
        dtype = np.dtype(spec)
    except TypeError:
        raise TypeError(f"Cannot use {spec!r} as a storage kind") from None
    for kind in STORAGE_KINDS:
        if kind.dtype is not None and np.dtype(kind.dtype) == dtype:
            return kind
    raise ValueError(f"No storage kind for {dtype} values")


def smallest_storage_kind(num_bits):
    '''
    Narrowest storage kind that can hold an integer of a certain bit size.
    '''
    if not 1 <= num_bits <= U128.bits:
        raise ValueError(f"No storage kind holds {num_bits:,d} bits")
    for kind in STORAGE_KINDS:
        if num_bits <= kind.bits:
            return kind
