from wrapt import ObjectProxy

from witc.errors import UnknownTypeError


class Type:
    bits = None

    def describe(self):
        raise NotImplementedError()


class Integer(ObjectProxy, Type):
    bits = None
    is_unsigned = None

    def __init__(self, bits, is_unsigned):
        super().__init__('%sint%d' % ('u' if is_unsigned else '', bits))
        self.bits = bits
        self.is_unsigned = is_unsigned

    def describe(self):
        return '%d-bit %s integer' % (self.bits, 'unsigned' if self.is_unsigned else 'signed')

    def __repr__(self):
        return 'Integer(%d, %r)' % (self.bits, self.is_unsigned)


class Float(ObjectProxy, Type):
    bits = None

    def __init__(self, bits):
        super().__init__('float%d' % bits)
        self.bits = bits

    def describe(self):
        return '%d-bit float' % self.bits

    def __repr__(self):
        return 'Float(%d)' % self.bits


primitive_types = {
    'u8': Integer(8, True),
    'u16': Integer(16, True),
    'u32': Integer(32, True),
    'u64': Integer(64, True),
    's8': Integer(8, False),
    's16': Integer(16, False),
    's32': Integer(32, False),
    's64': Integer(64, False),
    'float32': Float(32),
    'float64': Float(64),
}


def lookup(name):
    try:
        return primitive_types[name]
    except KeyError:
        raise UnknownTypeError(name) from None
