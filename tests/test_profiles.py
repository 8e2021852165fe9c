import math
import textwrap

import pytest

from polyround.errors import InvalidInputError
from polyround.profiles import (
    POLYROUND_PROFILE_PATH,
    PartProfile,
    clear_cache,
    get_profile,
    list_profiles,
    load_catalog,
)
from polyround.quality import RenderQuality


@pytest.fixture(autouse=True)
def _fresh_cache(monkeypatch):
    monkeypatch.delenv(POLYROUND_PROFILE_PATH, raising=False)
    clear_cache()
    yield
    clear_cache()


def _write(path, text):
    path.write_text(textwrap.dedent(text), encoding='utf-8')
    return path


BRACKET = """\
    schema_version: "1.0"
    profiles:
      bracket:
        quality: fine
        height: 4
        steps:
          - [0, 0, 1]
          - [30, 0, 2]
          - [0, 12, 2]
          - [-30, 0, 1]
    """


def test_bundled_catalog():
    names = list_profiles()
    assert {'aa_cell_cradle', 'knob_half_section', 'cable_hook'} <= set(names)
    assert names == sorted(names)


def test_bundled_cradle_profile():
    cradle = get_profile('aa_cell_cradle')
    assert isinstance(cradle, PartProfile)
    assert cradle.closed
    assert cradle.height == 10.0
    assert cradle.quality is RenderQuality.NORMAL
    assert len(cradle.steps) == 8
    assert cradle.source.endswith('parts.yaml')
    # every corner is filleted at 8 segments
    assert len(cradle.outline()) == 8 * 8
    assert len(cradle.outline('preview')) == 8 * 2
    assert cradle.mesh().volume() > 0


def test_bundled_knob_revolves():
    knob = get_profile('knob_half_section')
    assert knob.revolve == 360.0
    mesh = knob.mesh('draft')
    lo, hi = mesh.bbox()
    assert hi[0] == pytest.approx(15.0, rel=0.05)
    assert hi[2] == pytest.approx(12.0)
    assert mesh.volume() > 0


def test_bundled_open_profile():
    hook = get_profile('cable_hook')
    assert not hook.closed
    assert len(hook.outline()) == 1 + 4 + 4 + 1
    with pytest.raises(InvalidInputError):
        hook.mesh()


def test_explicit_catalog_path(tmp_path):
    path = _write(tmp_path / 'mine.yaml', BRACKET)
    bracket = get_profile('bracket', path=path)
    assert bracket.quality is RenderQuality.FINE
    assert bracket.segments_per_corner() == 16
    assert bracket.segments_per_corner(3) == 3
    assert bracket.points()[2].xy == (30.0, 12.0)
    # each quarter fillet removes (4 - pi) r^2 / 4 of area
    area = 30 * 12 - (4 - math.pi) / 4 * (1 + 4 + 4 + 1)
    assert bracket.mesh().volume() == pytest.approx(area * 4, rel=1e-3)


def test_segments_override_in_catalog(tmp_path):
    path = _write(tmp_path / 'mine.yaml', BRACKET.replace('quality: fine', 'segments: 3'))
    assert get_profile('bracket', path=path).segments_per_corner() == 3


def test_environment_search_path(tmp_path, monkeypatch):
    _write(tmp_path / 'custom.yaml', BRACKET)
    monkeypatch.setenv(POLYROUND_PROFILE_PATH, str(tmp_path))
    clear_cache()
    assert list_profiles('custom') == ['bracket']


def test_environment_overrides_bundled(tmp_path, monkeypatch):
    _write(tmp_path / 'parts.yaml', BRACKET)
    monkeypatch.setenv(POLYROUND_PROFILE_PATH, str(tmp_path))
    clear_cache()
    assert list_profiles() == ['bracket']


def test_loaded_catalog_is_a_copy():
    catalog = load_catalog()
    catalog.clear()
    assert load_catalog()


def test_missing_catalog():
    with pytest.raises(FileNotFoundError):
        load_catalog('no_such_catalog')


def test_missing_custom_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(path=tmp_path / 'absent.yaml')


def test_unknown_profile():
    with pytest.raises(KeyError):
        get_profile('no_such_part')


@pytest.mark.parametrize('text', [
    "- just\n- a list\n",
    'schema_version: "2.0"\nprofiles: {}\n',
    'schema_version: "1.0"\n',
    'profiles:\n  p:\n    steps: []\n',
    'profiles:\n  p:\n    steps: [[0, 0], [1]]\n',
    'profiles:\n  p:\n    steps: [[0, 0], [1, 1, -2]]\n',
    'profiles:\n  p:\n    colour: red\n    steps: [[0, 0], [1, 1]]\n',
    'profiles:\n  p:\n    quality: ultra\n    steps: [[0, 0], [1, 1]]\n',
    'profiles:\n  p:\n    height: 1\n    revolve: 90\n    steps: [[0, 0], [1, 1]]\n',
    'profiles:\n  p:\n    closed: "no"\n    steps: [[0, 0], [1, 1]]\n',
    'profiles:\n  p:\n    steps: [[0, 0], [.nan, 1]]\n',
])
def test_malformed_catalogs(tmp_path, text):
    path = tmp_path / 'bad.yaml'
    path.write_text(text, encoding='utf-8')
    with pytest.raises(ValueError):
        load_catalog(path=path)
