# themes.py
# Python 3.x
# 테마 프리셋과 Qt 스타일시트 생성

from typing import Dict, Optional

DEFAULT_THEME = 'dark'
GLASS_THEME = 'glass'
GLASS_ALPHA = 110  # 반투명 버튼 알파값(0-255)

THEMES: Dict[str, Dict[str, str]] = {
    'dark': {
        'bg':          '#1C1C1E',
        'display_bg':  '#1C1C1E',
        'display_fg':  '#FFFFFF',
        'btn_bg':      '#333333',
        'btn_fg':      '#FFFFFF',
        'func_bg':     '#A5A5A5',
        'func_fg':     '#000000',
        'operator_bg': '#FF9F0A',
        'operator_fg': '#FFFFFF',
    },
    'light': {
        'bg':          '#F2F2F7',
        'display_bg':  '#F2F2F7',
        'display_fg':  '#1A2332',
        'btn_bg':      '#FFFFFF',
        'btn_fg':      '#2B3A4A',
        'func_bg':     '#D1D1D6',
        'func_fg':     '#1A2332',
        'operator_bg': '#2E8B57',
        'operator_fg': '#FFFFFF',
    },
    'glass': {
        'bg':          '#20232A',
        'display_bg':  '#20232A',
        'display_fg':  '#FFFFFF',
        'btn_bg':      '#3A3F4B',
        'btn_fg':      '#FFFFFF',
        'func_bg':     '#5A6270',
        'func_fg':     '#FFFFFF',
        'operator_bg': '#7FB3FF',
        'operator_fg': '#FFFFFF',
    },
    'ocean': {
        'bg':          '#0B2540',
        'display_bg':  '#0B2540',
        'display_fg':  '#E0F7FA',
        'btn_bg':      '#12406B',
        'btn_fg':      '#E0F7FA',
        'func_bg':     '#4FB3BF',
        'func_fg':     '#0B2540',
        'operator_bg': '#00ACC1',
        'operator_fg': '#FFFFFF',
    },
    'sunset': {
        'bg':          '#2D1B2E',
        'display_bg':  '#2D1B2E',
        'display_fg':  '#FFE8D6',
        'btn_bg':      '#4A2C40',
        'btn_fg':      '#FFE8D6',
        'func_bg':     '#B56576',
        'func_fg':     '#FFFFFF',
        'operator_bg': '#E56B6F',
        'operator_fg': '#FFFFFF',
    },
}


def theme_names():
    return list(THEMES)


def _rgba(hex_color: str, alpha: int) -> str:
    # '#RRGGBB' → 'rgba(r, g, b, a)'
    h = hex_color.lstrip('#')
    r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
    return f'rgba({r}, {g}, {b}, {alpha})'


def build_stylesheet(theme: str, glass: bool = False,
                     background: Optional[str] = None) -> str:
    """테마 이름/반투명 여부/배경 이미지로 창 전체 스타일시트를 만든다.

    모르는 테마 이름은 ValueError. background 가 None 이면 배경색만 쓴다.
    """
    if theme not in THEMES:
        raise ValueError(f'unknown theme: {theme!r}')
    p = THEMES[theme]

    def fill(key: str) -> str:
        return _rgba(p[key], GLASS_ALPHA) if glass else p[key]

    if background:
        # 슬래시 경로만 허용(Qt url())
        url = background.replace('\\', '/')
        window_rule = f'border-image: url("{url}") 0 0 0 0 stretch stretch;'
    else:
        window_rule = f'background-color: {p["bg"]};'

    return '\n'.join([
        f'#CalculatorWindow {{ {window_rule} }}',
        f'QLineEdit#display {{ background: {fill("display_bg")}; color: {p["display_fg"]};'
        ' border: none; }',
        f'QPushButton {{ background: {fill("btn_bg")}; color: {p["btn_fg"]};'
        ' border: none; border-radius: 24px; font-size: 20px; }',
        f'QPushButton[role="function"] {{ background: {fill("func_bg")}; color: {p["func_fg"]}; }}',
        f'QPushButton[role="operator"] {{ background: {fill("operator_bg")};'
        f' color: {p["operator_fg"]}; }}',
        'QPushButton:pressed { padding-top: 2px; }',
    ])
