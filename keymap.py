# keymap.py
# Python 3.x
# 키보드 키 이름/버튼 라벨 → 계산기 명령(Command) 변환

from typing import Optional

from calculator import Command

# 버튼 배치(아이폰 기본 계산기 레이아웃을 참고)
BUTTONS = [
    ['AC', '+/-', '%', '÷'],
    ['7',  '8',   '9', '×'],
    ['4',  '5',   '6', '−'],
    ['1',  '2',   '3', '+'],
    ['0',  '.',   '⌫', '='],
]

OPERATOR_LABELS = ('+', '−', '×', '÷')

_LABEL_COMMANDS = {
    'AC': 'clear',
    '+/-': 'negate',
    '%': 'percent',
    '=': 'equals',
    '.': 'point',
    '⌫': 'backspace',
}

_KEY_COMMANDS = {
    'Enter': 'equals',
    'Return': 'equals',
    '=': 'equals',
    'Backspace': 'backspace',
    'Escape': 'clear',
    '%': 'percent',
    '.': 'point',
}

# 키보드 연산자 → 버튼 기호
_KEY_OPERATORS = {
    '+': '+',
    '-': '−',
    '*': '×',
    'x': '×',
    'X': '×',
    '/': '÷',
}


def command_for_label(label: str) -> Optional[Command]:
    """화면 버튼 라벨에 대응하는 명령. 모르는 라벨이면 None."""
    if len(label) == 1 and label in '0123456789':
        return Command('digit', label)
    if label in OPERATOR_LABELS:
        return Command('operator', label)
    name = _LABEL_COMMANDS.get(label)
    return Command(name) if name else None


def command_for_key(key: str) -> Optional[Command]:
    """키 이름('7', '+', 'Enter', 'Escape' 등)에 대응하는 명령."""
    if len(key) == 1 and key in '0123456789':
        return Command('digit', key)
    if key in _KEY_OPERATORS:
        return Command('operator', _KEY_OPERATORS[key])
    name = _KEY_COMMANDS.get(key)
    return Command(name) if name else None
