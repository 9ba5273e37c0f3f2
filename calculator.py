# calculator.py
# Python 3.x, 표준 라이브러리만 사용
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import math
from collections import namedtuple
from decimal import Decimal
from typing import Optional, Tuple

MAX_DIGITS = 15  # 입력 자릿수 및 표시 폭 제한
DISPLAY_PRECISION = 15  # 표시용 유효숫자
RESULT_PRECISION = 12  # '=' 결과 반올림 유효숫자
EXPONENT_UPPER = 1e12
EXPONENT_LOWER = 1e-12

ERROR = 'ERROR'  # 오류 상태를 나타내는 입력 버퍼 값
ERROR_TEXT = 'Error'

# UI/키보드 기호 → 내부 연산자 이름
OPERATORS = {
    '+': 'add',
    '−': 'subtract',
    '-': 'subtract',
    '×': 'multiply',
    '*': 'multiply',
    'x': 'multiply',
    'X': 'multiply',
    '÷': 'divide',
    '/': 'divide',
    'add': 'add',
    'subtract': 'subtract',
    'multiply': 'multiply',
    'divide': 'divide',
}

COMMANDS = (
    'digit',
    'point',
    'operator',
    'equals',
    'clear',
    'negate',
    'percent',
    'backspace',
)


class DivideByZero(ZeroDivisionError):
    """나눗셈의 제수가 정확히 0인 경우"""


def _to_number(text: str) -> float:
    # 해석할 수 없는 문자열은 NaN
    try:
        return float(text)
    except ValueError:
        return math.nan


class Entry(str):
    """현재 입력 버퍼.

    생성 시점에 불변식을 검사한다: 소수점은 최대 하나, 항상 유한한 수로
    해석된다. 조건을 어기면 ValueError.
    """

    __slots__ = ()

    def __new__(cls, text: str = '0') -> 'Entry':
        if text.count('.') > 1:
            raise ValueError(f'decimal point appears more than once: {text!r}')
        if not math.isfinite(_to_number(text)):
            raise ValueError(f'not a finite number: {text!r}')
        return super().__new__(cls, text)

    @property
    def digit_count(self) -> int:
        # 부호/소수점/지수 표기 문자는 제외
        return sum(ch.isdigit() for ch in self)


State = namedtuple(
    'State',
    ['current_input', 'accumulator', 'pending_operator', 'last_pressed_equals'],
)

INITIAL_STATE = State(Entry('0'), None, None, False)
ERROR_STATE = State(ERROR, None, None, False)


def normalize_operator(op: str) -> str:
    try:
        return OPERATORS[op]
    except KeyError:
        raise ValueError(f'unknown operator: {op!r}') from None


class Command(namedtuple('Command', ['name', 'arg'])):
    """입력 어댑터가 엔진에 넘기는 정규화된 명령"""

    __slots__ = ()

    def __new__(cls, name: str, arg: Optional[str] = None) -> 'Command':
        if name not in COMMANDS:
            raise ValueError(f'unknown command: {name!r}')
        if name == 'digit':
            if arg is None or len(arg) != 1 or arg not in '0123456789':
                raise ValueError(f'digit expects one of 0-9, got {arg!r}')
        elif name == 'operator':
            arg = normalize_operator(arg)
        else:
            arg = None
        return super().__new__(cls, name, arg)


def format_number(x: float) -> str:
    """숫자를 표시 문자열로 변환한다.

    최단 왕복 자릿수를 쓰고, 정수는 '.0' 없이 표기한다. 1e21 이상 또는
    1e-6 미만의 크기는 '1e+21', '1.5e-7' 형태의 지수 표기로 바꾼다.
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x == 0:
        return '0'

    sign = '-' if x < 0 else ''
    _, coefficient, exponent = Decimal(repr(abs(x))).as_tuple()
    digits = ''.join(str(d) for d in coefficient).rstrip('0')
    k = len(digits)
    n = len(coefficient) + exponent  # 소수점 위치

    if k <= n <= 21:
        return sign + digits + '0' * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + '.' + digits[n:]
    if -6 < n <= 0:
        return sign + '0.' + '0' * (-n) + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + '.' + digits[1:]
    return '{}{}e{}{}'.format(sign, mantissa, '+' if e >= 0 else '-', abs(e))


def round_for_display(n: float) -> float:
    """'=' 결과를 유효숫자 12자리로 반올림한다."""
    if not math.isfinite(n):
        return n
    a = abs(n)
    if a > EXPONENT_UPPER or (a != 0 and a < EXPONENT_LOWER):
        # 정규화된 지수 표기로 반올림
        return float(format(n, '.{}e'.format(RESULT_PRECISION - 1)))
    return float(format(n, '.{}g'.format(RESULT_PRECISION)))


def compute(a: float, b: float, op: str) -> float:
    """a op b. 0으로 나누면 DivideByZero, 유한하지 않은 피연산자는 NaN."""
    op = OPERATORS.get(op, op)
    if op == 'divide' and b == 0:
        raise DivideByZero(f'{a} / 0')
    if not (math.isfinite(a) and math.isfinite(b)):
        return math.nan
    if op == 'add':
        return a + b
    if op == 'subtract':
        return a - b
    if op == 'multiply':
        return a * b
    if op == 'divide':
        return a / b
    return b


def _is_error(state: State) -> bool:
    return state.current_input == ERROR


def _input_digit(state: State, d: str) -> State:
    if _is_error(state):
        return state
    if state.last_pressed_equals:
        # = 직후 새 입력이면 새 계산 시작
        state = INITIAL_STATE

    cur = state.current_input
    if d == '.':
        if '.' in cur:
            return state
        candidate = cur + '.'
    elif cur == '0':
        candidate = d
    else:
        if cur.digit_count >= MAX_DIGITS:
            return state
        candidate = cur + d

    try:
        entry = Entry(candidate)
    except ValueError:
        # 해석 불가능한 버퍼가 되는 입력은 무시
        return state
    return state._replace(current_input=entry)


def _input_point(state: State, _arg: None = None) -> State:
    return _input_digit(state, '.')


def _press_operator(state: State, op: str) -> State:
    if _is_error(state):
        return state

    value = _to_number(state.current_input)
    acc = state.accumulator
    if acc is None:
        # 첫 연산자: 현재 입력을 축적
        acc = value
    elif not (state.last_pressed_equals and state.pending_operator is None):
        try:
            acc = compute(acc, value, state.pending_operator or op)
        except DivideByZero:
            return ERROR_STATE

    return State(Entry('0'), acc, op, False)


def _press_equals(state: State, _arg: None = None) -> State:
    if _is_error(state):
        return state
    if state.pending_operator is None:
        # 단독 = 는 다음 숫자 입력을 새 계산으로 만드는 표시만 남김
        return state._replace(last_pressed_equals=True)

    acc = 0.0 if state.accumulator is None else state.accumulator
    try:
        result = compute(acc, _to_number(state.current_input), state.pending_operator)
    except DivideByZero:
        return ERROR_STATE
    if not math.isfinite(result):
        return ERROR_STATE

    return State(Entry(format_number(round_for_display(result))), None, None, True)


def _clear(state: State, _arg: None = None) -> State:
    return INITIAL_STATE


def _negate(state: State, _arg: None = None) -> State:
    cur = state.current_input
    if _is_error(state) or cur == '0':
        return state
    text = cur[1:] if cur.startswith('-') else '-' + cur
    return state._replace(current_input=Entry(text))


def _percent(state: State, _arg: None = None) -> State:
    if _is_error(state):
        return state
    value = _to_number(state.current_input) / 100
    if not math.isfinite(value):
        return ERROR_STATE
    return state._replace(current_input=Entry(format_number(value)))


def _backspace(state: State, _arg: None = None) -> State:
    if _is_error(state):
        return state
    if state.last_pressed_equals:
        return INITIAL_STATE

    # 남은 문자열이 수로 해석될 때까지 끝 문자를 지움 ('-5' → '0')
    text = state.current_input[:-1]
    while text:
        try:
            return state._replace(current_input=Entry(text))
        except ValueError:
            text = text[:-1]
    return state._replace(current_input=Entry('0'))


_HANDLERS = {
    'digit': _input_digit,
    'point': _input_point,
    'operator': _press_operator,
    'equals': _press_equals,
    'clear': _clear,
    'negate': _negate,
    'percent': _percent,
    'backspace': _backspace,
}


def render(state: State) -> Tuple[State, str]:
    """표시 문자열을 만든다.

    15자를 넘는 버퍼는 유효숫자 15자리로 줄여서 보여줄 뿐 상태는 그대로
    둔다. 단, 수로 해석되지 않으면 오류 상태로 바꾼다.
    """
    if _is_error(state):
        return state, ERROR_TEXT

    text = str(state.current_input)
    if len(text) > MAX_DIGITS:
        value = _to_number(text)
        if not math.isfinite(value):
            return ERROR_STATE, ERROR_TEXT
        text = format_number(float(format(value, '.{}e'.format(DISPLAY_PRECISION - 1))))
    return state, text


def transition(state: State, command: Command) -> Tuple[State, str]:
    """(상태, 명령) → (새 상태, 표시 문자열)"""
    return render(_HANDLERS[command.name](state, command.arg))


class Calculator:
    """연산 엔진: 상태를 보관하고 버튼/키 명령을 transition()에 넘긴다"""

    MAX_DIGITS = MAX_DIGITS

    def __init__(self, state: Optional[State] = None) -> None:
        self.state = INITIAL_STATE if state is None else state

    def execute(self, command: Command) -> str:
        self.state, text = transition(self.state, command)
        return text

    # 필수 API
    def input_digit(self, d: str) -> None:
        self.execute(Command('digit', d))

    def input_dot(self) -> None:
        self.execute(Command('point'))

    def set_operator(self, op: str) -> None:
        """op in {'+','−','×','÷'} 또는 연산자 이름"""
        self.execute(Command('operator', op))

    def equal(self) -> None:
        self.execute(Command('equals'))

    def reset(self) -> None:
        self.execute(Command('clear'))

    def negative_positive(self) -> None:
        self.execute(Command('negate'))

    def percent(self) -> None:
        self.execute(Command('percent'))

    def backspace(self) -> None:
        self.execute(Command('backspace'))

    # 표시 문자열
    def display_text(self) -> str:
        self.state, text = render(self.state)
        return text

    @property
    def current_input(self) -> str:
        return str(self.state.current_input)

    @property
    def is_error(self) -> bool:
        return _is_error(self.state)

    @property
    def state_name(self) -> str:
        if self.is_error:
            return 'error'
        if self.state.last_pressed_equals:
            return 'result'
        return 'entering'
