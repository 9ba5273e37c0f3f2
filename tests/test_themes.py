import pytest

from themes import DEFAULT_THEME, THEMES, _rgba, build_stylesheet, theme_names


def test_theme_names():
    assert DEFAULT_THEME in theme_names()
    assert 'glass' in theme_names()
    assert set(theme_names()) == set(THEMES)


def test_rgba():
    assert _rgba('#FF9F0A', 110) == 'rgba(255, 159, 10, 110)'


def test_solid_stylesheet():
    css = build_stylesheet('dark')
    assert 'background-color: #1C1C1E' in css
    assert 'rgba(' not in css
    assert 'QPushButton[role="operator"] { background: #FF9F0A;' in css


def test_glass_stylesheet():
    css = build_stylesheet('dark', glass=True)
    assert 'background: rgba(51, 51, 51, 110)' in css


def test_background_image():
    css = build_stylesheet('light', background='C:\\images\\1.jpg')
    assert 'border-image: url("C:/images/1.jpg")' in css
    assert 'background-color: #F2F2F7' not in css


def test_unknown_theme():
    with pytest.raises(ValueError):
        build_stylesheet('neon')


@pytest.mark.parametrize('name', sorted(THEMES))
@pytest.mark.parametrize('part', ['display', 'btn', 'func', 'operator'])
def test_text_differs_from_fill(name, part):
    palette = THEMES[name]
    assert palette[f'{part}_bg'].upper() != palette[f'{part}_fg'].upper()


def test_glass_theme_with_glass_off_is_readable():
    css = build_stylesheet('glass', glass=False)
    assert 'QPushButton { background: #FFFFFF; color: #FFFFFF;' not in css
    assert 'QPushButton { background: #3A3F4B; color: #FFFFFF;' in css
