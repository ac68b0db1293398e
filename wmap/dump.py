from wmap.ff_world_map import StdString, WorldMapFile
from wmap.util import dump_line, to_unicode


INDENT = '  '


def std_string_to_str(s: StdString, encoding='utf-8'):
    if not s.data:
        return 'len:{} ""'.format(s.length)

    try:
        text = '"{}"'.format(to_unicode(s.data, encoding))
    except (UnicodeDecodeError, LookupError):
        text = 'hex:{}'.format(dump_line(s.data))

    return 'len:{} {}'.format(s.length, text)


def _dump_value(lines, name, value, depth, encoding):
    prefix = INDENT * depth
    if isinstance(value, StdString):
        lines.append('{}{}: {}'.format(prefix, name, std_string_to_str(value, encoding)))
    elif isinstance(value, tuple) and hasattr(value, '_fields'):
        lines.append('{}{}: {}'.format(prefix, name, type(value).__name__))
        for field in value._fields:
            _dump_value(lines, field, getattr(value, field), depth + 1, encoding)
    elif isinstance(value, tuple):
        if len(value) == 0:
            lines.append('{}{}: []'.format(prefix, name))
        elif all(isinstance(v, int) for v in value):
            lines.append('{}{}: [{}]'.format(prefix, name, ', '.join(str(v) for v in value)))
        else:
            lines.append('{}{}: [{}]'.format(prefix, name, len(value)))
            for idx, v in enumerate(value):
                _dump_value(lines, '[{}]'.format(idx), v, depth + 1, encoding)
    else:
        lines.append('{}{}: {} (0x{:08x})'.format(prefix, name, value, value))


def dump_to_string(world_map: WorldMapFile, encoding='utf-8'):
    lines = []
    _dump_value(lines, 'world_map', world_map, 0, encoding)
    return '\n'.join(lines)
