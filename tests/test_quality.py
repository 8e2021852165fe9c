import pytest

from polyround.errors import InvalidInputError
from polyround.quality import DEFAULT_QUALITY, RenderQuality, segments_for


@pytest.mark.parametrize('quality, segments', [
    (RenderQuality.PREVIEW, 2),
    (RenderQuality.DRAFT, 4),
    (RenderQuality.NORMAL, 8),
    (RenderQuality.FINE, 16),
    (RenderQuality.FINAL, 32),
])
def test_quality_segments(quality, segments):
    assert segments_for(quality) == segments
    assert segments_for(quality.name.lower()) == segments


def test_default_and_plain_integers():
    assert segments_for() == DEFAULT_QUALITY.segments
    assert segments_for(5) == 5
    assert RenderQuality.parse(' Final ') is RenderQuality.FINAL


@pytest.mark.parametrize('bad', [0, -1, True, 'ultra', 2.5, None])
def test_bad_quality(bad):
    with pytest.raises(InvalidInputError):
        segments_for(bad)
