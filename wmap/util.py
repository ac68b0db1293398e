import datetime
import os


class Logger:
    def __init__(self, working_dir=None):
        self.working_dir = working_dir

    def log_base(self, level, s):
        msg = '{}: {}'.format(datetime.datetime.now(), s)
        if self.working_dir is not None:
            with open(os.path.join(self.working_dir, 'log.txt'), 'a') as f:
                f.write(msg + '\n')
            if level <= 2:
                print(msg)
        else:
            # no log file, everything goes to stdout
            print(msg)

        return msg

    def error(self, s):
        self.log_base(0, s)

    def warning(self, s):
        self.log_base(1, s)

    def log(self, s):
        self.log_base(2, s)

    def trace(self, s):
        self.log_base(3, s)

    def debug(self, s):
        self.log_base(3, s)


def dump_line(line):
    return ''.join(['{:02x}'.format(v) for v in bytearray(line)])


def make_dir_for_file(fn):
    new_dir = os.path.dirname(fn)
    if new_dir:
        os.makedirs(new_dir, exist_ok=True)
    return new_dir


def to_unicode(s, encoding='utf-8'):
    if isinstance(s, bytes):
        s = s.decode(encoding)
    return s
