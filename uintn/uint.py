#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import operator

from uintn.storage import smallest_storage_kind, storage_kind


_UINT_TYPES = {}


class Uint:
    '''
    Fixed-width unsigned integers, integers that explicitly under- or over-flow
    according to a particular number of bits. A width is fixed per type, so the
    class is parameterized before use:

        Counter = Uint[5, 'u8']
        Counter(23) + Counter(27)  # u5(18)

    Values are held in a native unsigned storage kind, and every result is the
    storage kind's wrapping result masked down to the low bits.
    '''

    __slots__ = ('num',)

    # Make numpy scalars on the left of == defer to the reflected comparison.
    __array_ufunc__ = None

    num_bits = None
    storage = None
    mask = None

    def __class_getitem__(cls, params):
        if not isinstance(params, tuple):
            params = (params,)
        return uint_type(*params)

    def __init__(self, num):
        '''
        Initialize with any value of the storage kind, masked down to the number of
        bits for this type.
        :param num: Integer value that fits the storage kind, e.g. 0..255 for 'u8'
        '''
        if self.num_bits is None:
            raise TypeError("Uint needs a width, e.g. Uint[12, 'u16'](num)")
        self.num = self.storage.native(num) & self.mask
        assert self.num <= self.mask, f"Value {self.num} out-of-range for {self.num_bits:,d} bits"

    @classmethod
    def min(cls):
        return cls(0)

    @classmethod
    def max(cls):
        return cls(cls.mask)

    def __repr__(self):
        return f"u{self.num_bits}({int(self.num)})"

    __str__ = __repr__

    def __format__(self, fmt_spec):
        '''
        Just use the underlying Python int()'s formatting, for anything but a bare
        "{}" which gets the u5(18) form.
        '''
        if not fmt_spec:
            return str(self)
        return int(self.num).__format__(fmt_spec)

    def __int__(self):
        return int(self.num)

    def __bool__(self):
        return bool(self.num)

    def __hash__(self):
        return hash(int(self.num))

    def _wrap(self, op, o):
        return self.__class__(self.storage.wrapping(op, self.num, o.num) & self.mask)

    def __add__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self._wrap(operator.add, o)

    def __sub__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self._wrap(operator.sub, o)

    def __mul__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self._wrap(operator.mul, o)

    def __truediv__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        if o.num == 0:
            raise ZeroDivisionError(f"{self!r} divided by {o!r}")
        # quotient never exceeds the dividend, masking keeps the one rule for all ops
        return self._wrap(operator.floordiv, o)

    __floordiv__ = __truediv__

    '''
    Equality holds against the same type, and against bare native values of the
    storage kind without masking them. Comparison dunders cannot overflow, so
    ordering just uses the stored values.
    '''
    def __eq__(self, o):
        if type(o) is type(self):
            return self.num == o.num
        if isinstance(o, int) or self.storage.is_native(o):
            return int(self.num) == int(o)
        return NotImplemented

    def __lt__(self, o): return self.num < o.num if type(o) is type(self) else NotImplemented
    def __le__(self, o): return self.num <= o.num if type(o) is type(self) else NotImplemented
    def __gt__(self, o): return self.num > o.num if type(o) is type(self) else NotImplemented
    def __ge__(self, o): return self.num >= o.num if type(o) is type(self) else NotImplemented


def uint_type(num_bits, storage=None):
    '''
    Return the Uint type for a particular bit size and storage kind, creating it
    the first time it is asked for.
    :param num_bits: Number of bits, from 1 up to the width of the storage kind
    :param storage: Storage kind, or anything storage_kind() accepts. Defaults to
    the narrowest kind that holds num_bits.
    '''
    if isinstance(num_bits, bool) or not isinstance(num_bits, int):
        raise ValueError(f"Width must be an integer, not {num_bits!r}")
    if storage is None:
        kind = smallest_storage_kind(num_bits)
    else:
        kind = storage_kind(storage)
    if not 1 <= num_bits <= kind.bits:
        raise ValueError(f"Width of {num_bits:,d} bits does not fit {kind.name} storage")

    key = (num_bits, kind.name)
    if key not in _UINT_TYPES:
        logging.debug(f"Creating {num_bits:,d}-bit unsigned integer type over {kind.name} storage.")
        cls = type(f"Uint{num_bits}", (Uint,), {
            '__slots__': (),
            '__qualname__': f"Uint[{num_bits}, {kind.name}]",
            '__module__': __name__,
            'num_bits': num_bits,
            'storage': kind,
            'mask': kind.native((1 << num_bits) - 1),
        })
        _UINT_TYPES.setdefault(key, cls)
    return _UINT_TYPES[key]
