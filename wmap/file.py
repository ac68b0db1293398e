import struct
from wmap.errors import EWmapInsufficientData


class ArchiveFile:
    """Forward only reader over an in memory buffer.

    All integers are little endian. A read that cannot be satisfied raises
    EWmapInsufficientData and leaves the position where the read began.
    """

    def __init__(self, buffer, debug=False, logger=None):
        self.buffer = bytes(buffer)
        self.pos = 0
        self.debug = debug
        self.logger = logger

    def tell(self):
        return self.pos

    def remaining(self):
        return len(self.buffer) - self.pos

    def read(self, n):
        if n < 0:
            raise ValueError('ArchiveFile.read: negative length {}'.format(n))
        available = self.remaining()
        if n > available:
            raise EWmapInsufficientData(self.pos, n, available)
        buf = self.buffer[self.pos:self.pos + n]
        self.pos += n
        return buf

    def read_base(self, fmt, elen):
        pos = self.pos
        buf = self.read(elen)
        v = struct.unpack('<' + fmt, buf)[0]

        if self.debug:
            vs = ''.join(['{:02x}'.format(t) for t in buf])
            msg = '@0x{:08x} {} {}'.format(pos, vs, v)
            if self.logger is None:
                print(msg)
            else:
                self.logger.trace(msg)

        return v

    def read_u32(self):
        return self.read_base('I', 4)
