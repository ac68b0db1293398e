

class EWmapErrorParse(Exception):
    def __init__(self, *args, **kwargs):
        Exception.__init__(self, *args, **kwargs)


class EWmapInsufficientData(EWmapErrorParse):
    def __init__(self, offset, needed, available, *args):
        if not args:
            args = ('Out of data @ 0x{:08x}: needed {} bytes, {} available'.format(offset, needed, available), )
        EWmapErrorParse.__init__(self, *args)
        self.offset = offset
        self.needed = needed
        self.available = available


class EWmapCountLimit(EWmapErrorParse):
    def __init__(self, offset, count, limit, *args):
        if not args:
            args = ('Declared count {} @ 0x{:08x} exceeds limit {}'.format(count, offset, limit), )
        EWmapErrorParse.__init__(self, *args)
        self.offset = offset
        self.count = count
        self.limit = limit


class EWmapSettingsError(Exception):
    def __init__(self, *args, **kwargs):
        Exception.__init__(self, *args, **kwargs)
