import json
import pytest
from wmap.errors import EWmapSettingsError
from wmap.settings import DecodeSettings


def test_defaults():
    s = DecodeSettings()
    assert s.debug is False
    assert s.max_count is None
    assert s.text_encoding == 'utf-8'
    assert s.working_dir is None


def test_save_load(tmp_path):
    fn = str(tmp_path / 'settings.json')
    DecodeSettings(debug=True, max_count=4096, text_encoding='shift_jis').save(fn)
    s = DecodeSettings.load(fn)
    assert s.to_dict() == {'debug': True, 'max_count': 4096, 'text_encoding': 'shift_jis', 'working_dir': None}


def test_load_partial(tmp_path):
    fn = tmp_path / 'settings.json'
    fn.write_text(json.dumps({'max_count': 10}))
    s = DecodeSettings.load(str(fn))
    assert s.max_count == 10
    assert s.text_encoding == 'utf-8'


@pytest.mark.parametrize('content', [
    '{not json',
    '[1, 2]',
    '{"colour": "red"}',
    '{"max_count": -1}',
    '{"max_count": "many"}',
])
def test_load_bad(tmp_path, content):
    fn = tmp_path / 'settings.json'
    fn.write_text(content)
    with pytest.raises(EWmapSettingsError):
        DecodeSettings.load(str(fn))


def test_load_missing(tmp_path):
    with pytest.raises(EWmapSettingsError):
        DecodeSettings.load(str(tmp_path / 'nope.json'))


@pytest.mark.parametrize('settings', [
    {'debug': 'yes'},
    {'max_count': True},
    {'text_encoding': 5},
    {'text_encoding': 'no-such-codec'},
    {'working_dir': 3},
])
def test_load_bad_types(tmp_path, settings):
    fn = tmp_path / 'settings.json'
    fn.write_text(json.dumps(settings))
    with pytest.raises(EWmapSettingsError):
        DecodeSettings.load(str(fn))


def test_load_working_dir(tmp_path):
    fn = tmp_path / 'settings.json'
    fn.write_text(json.dumps({'working_dir': str(tmp_path / 'missing')}))
    with pytest.raises(EWmapSettingsError):
        DecodeSettings.load(str(fn))

    fn.write_text(json.dumps({'working_dir': str(tmp_path)}))
    assert DecodeSettings.load(str(fn)).working_dir == str(tmp_path)
