"""색상 파서 모듈 — "#RRGGBB" / "#RGB" 문자열을 RGB 튜플로 변환한다."""

import logging

from PIL import ImageColor

from errors import ParseError

logger = logging.getLogger(__name__)

# 색상이 없거나 길이가 맞지 않을 때 사용하는 색상
FALLBACK_COLOR = (0, 0, 0)


def parse_color(value: str) -> tuple[int, int, int]:
    """16진 색상 문자열을 (r, g, b)로 변환한다.

    앞의 '#'은 생략 가능하다. 6자리(RRGGBB)와 3자리(RGB, 각 자리 반복)만
    해석하며, 그 외 길이는 FALLBACK_COLOR(검정)를 반환한다.
    길이는 맞지만 16진수가 아닌 문자가 있으면 ParseError.
    """
    digits = value.lstrip("#")
    if len(digits) not in (3, 6):
        return FALLBACK_COLOR
    try:
        r, g, b = ImageColor.getrgb("#" + digits)[:3]
    except ValueError as e:
        raise ParseError(value) from e
    return r, g, b


def resolve_color(value: str | None) -> tuple[int, int, int]:
    """렌더링용 색상을 결정한다. 해석 실패 시 경고를 남기고 검정으로 대체한다."""
    if value is None:
        return FALLBACK_COLOR
    try:
        return parse_color(value)
    except ParseError as e:
        logger.warning("색상 해석 실패, 검정으로 대체: %s", e)
        return FALLBACK_COLOR
