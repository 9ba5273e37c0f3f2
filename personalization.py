# personalization.py
# Python 3.x, PyQt5
# 테마/반투명 모드/배경 이미지 설정을 QSettings(INI)에 저장하고 불러온다

import logging
from pathlib import Path
from typing import Optional, Union

from PyQt5.QtCore import QSettings

from themes import DEFAULT_THEME, GLASS_THEME, THEMES, build_stylesheet

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_SETTINGS_PATH = Path.home() / '.chain_calculator.ini'

THEME_KEY = 'calculator_theme'
GLASS_KEY = 'calculator_glass_mode'
BG_KEY = 'calculator_background'

NO_BACKGROUND = 'none'
DEFAULT_BACKGROUND = 'background/1.jpg'
BACKGROUNDS = [NO_BACKGROUND] + [f'background/{i}.jpg' for i in range(1, 6)]

logger = logging.getLogger('chain_calculator.personalization')


class Personalization:
    """저장된 꾸미기 설정(테마, 반투명 버튼, 배경)"""

    def __init__(self, settings: QSettings, base_dir: Path = BASE_DIR) -> None:
        self.settings = settings
        self.base_dir = Path(base_dir)
        self.theme = DEFAULT_THEME
        self.glass = False
        self.background = DEFAULT_BACKGROUND

    @classmethod
    def from_file(cls, path: Union[str, Path] = DEFAULT_SETTINGS_PATH,
                  base_dir: Path = BASE_DIR) -> 'Personalization':
        settings = QSettings(str(path), QSettings.IniFormat)
        return cls(settings, base_dir=base_dir)

    def load(self) -> 'Personalization':
        theme = self.settings.value(THEME_KEY, DEFAULT_THEME, type=str)
        if theme not in THEMES:
            logger.warning('[설정] 알 수 없는 테마 %r, 기본값 %r 사용', theme, DEFAULT_THEME)
            theme = DEFAULT_THEME
        self.theme = theme
        self.glass = self.settings.value(GLASS_KEY, theme == GLASS_THEME, type=bool)

        background = self.settings.value(BG_KEY, '', type=str)
        if not background:
            # 첫 실행: 기본 배경을 저장해 둔다
            background = DEFAULT_BACKGROUND
            self.settings.setValue(BG_KEY, background)
            self.settings.sync()
        self.background = background

        logger.info('[설정] 불러옴: theme=%s, glass=%s, background=%s',
                    self.theme, self.glass, self.background)
        self._warn_missing_background()
        return self

    def set_theme(self, name: str) -> None:
        """테마 변경. glass 테마만 반투명 버튼을 켠다."""
        if name not in THEMES:
            raise ValueError(f'unknown theme: {name!r}')
        self.theme = name
        self.glass = name == GLASS_THEME
        self.settings.setValue(THEME_KEY, name)
        self.settings.setValue(GLASS_KEY, self.glass)
        self.settings.sync()
        logger.info('[설정] 테마=%s, glass=%s', name, self.glass)

    def set_glass(self, enabled: bool) -> None:
        self.glass = bool(enabled)
        self.settings.setValue(GLASS_KEY, self.glass)
        self.settings.sync()
        logger.info('[설정] glass=%s', self.glass)

    def toggle_glass(self) -> bool:
        self.set_glass(not self.glass)
        return self.glass

    def set_background(self, image: Optional[str]) -> None:
        if not image:
            image = NO_BACKGROUND
        self.background = image
        self.settings.setValue(BG_KEY, image)
        self.settings.sync()
        logger.info('[설정] 배경=%s', image)
        self._warn_missing_background()

    def _warn_missing_background(self) -> None:
        # 배경을 정할 때만 경고
        if self.background != NO_BACKGROUND and self.background_path() is None:
            logger.warning('[설정] 배경 이미지를 찾을 수 없음: %s',
                           self.base_dir / self.background)

    def background_path(self) -> Optional[Path]:
        """배경 이미지 파일 경로. 배경 없음이거나 파일이 없으면 None."""
        if self.background == NO_BACKGROUND:
            return None
        path = Path(self.background)
        if not path.is_absolute():
            path = self.base_dir / path
        return path if path.is_file() else None

    def stylesheet(self) -> str:
        path = self.background_path()
        return build_stylesheet(self.theme, self.glass,
                                path.as_posix() if path else None)
