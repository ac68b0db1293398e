import codecs
import json
import os
from wmap.errors import EWmapSettingsError


class DecodeSettings:
    def __init__(self, debug=False, max_count=None, text_encoding='utf-8', working_dir=None):
        self.debug = debug
        self.max_count = max_count
        self.text_encoding = text_encoding
        self.working_dir = working_dir

    def to_dict(self):
        return {
            'debug': self.debug,
            'max_count': self.max_count,
            'text_encoding': self.text_encoding,
            'working_dir': self.working_dir,
        }

    def save(self, filename):
        with open(filename, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filename):
        if not os.path.isfile(filename):
            raise EWmapSettingsError('Settings file missing: {}'.format(filename))

        with open(filename, 'r') as f:
            try:
                settings = json.load(f)
            except json.JSONDecodeError as e:
                raise EWmapSettingsError('Settings file {} is not valid json: {}'.format(filename, e)) from e

        if not isinstance(settings, dict):
            raise EWmapSettingsError('Settings file {} must hold an object'.format(filename))

        unknown = set(settings) - set(cls().to_dict())
        if unknown:
            raise EWmapSettingsError('Settings file {}: unknown keys {}'.format(filename, sorted(unknown)))

        def bad(msg):
            return EWmapSettingsError('Settings file {}: {}'.format(filename, msg))

        if not isinstance(settings.get('debug', False), bool):
            raise bad('debug must be true or false')

        max_count = settings.get('max_count')
        if max_count is not None and (
                isinstance(max_count, bool) or not isinstance(max_count, int) or max_count < 0):
            raise bad('max_count must be a non-negative integer')

        text_encoding = settings.get('text_encoding', 'utf-8')
        if not isinstance(text_encoding, str):
            raise bad('text_encoding must be a string')
        try:
            codecs.lookup(text_encoding)
        except LookupError as e:
            raise bad('unknown text_encoding {}'.format(text_encoding)) from e

        working_dir = settings.get('working_dir')
        if working_dir is not None:
            if not isinstance(working_dir, str):
                raise bad('working_dir must be a string')
            if not os.path.isdir(working_dir):
                raise bad('working_dir {} is not a directory'.format(working_dir))

        return cls(**settings)
