"""글리프 배치 모듈 — 텍스트를 한 줄로 배치해 글리프 목록을 만든다."""

from dataclasses import dataclass
from typing import NamedTuple

from .font import FontHandle, GlyphPlacement


class Position(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class TextOptions:
    """글자 간격 설정."""
    letter_spacing: float = 2.0   # 글리프 폭 뒤에 더하는 간격 (px)
    space_width: float = 10.0     # 공백 문자 하나의 폭 (px)

    def __post_init__(self):
        if self.letter_spacing < 0 or self.space_width < 0:
            raise ValueError(
                f"간격은 0 이상이어야 합니다: letter_spacing={self.letter_spacing}, "
                f"space_width={self.space_width}"
            )


def layout_glyphs(
    text: str,
    font: FontHandle,
    scale: float,
    start: Position | tuple[float, float],
    options: TextOptions | None = None,
) -> list[GlyphPlacement]:
    """텍스트의 각 글자를 왼쪽부터 배치한 글리프 목록을 반환한다.

    start는 텍스트 상자의 좌상단이며, 기준선은 start.y + ascent에 놓인다.
    공백은 space_width만큼 전진하고, 글리프가 없는 글자는 건너뛴다
    (커서도 움직이지 않음). 같은 입력이면 항상 같은 목록이 나온다.
    """
    if scale <= 0:
        raise ValueError(f"scale은 0보다 커야 합니다: {scale}")
    options = options or TextOptions()
    start = Position(*start)

    x = start.x
    y = start.y + font.ascent(scale)
    placements = []
    for ch in text:
        if ch.isspace():
            x += options.space_width
            continue
        glyph = font.glyph(ch, scale, x, y)
        if glyph is None:
            continue
        placements.append(glyph)
        x += glyph.width + options.letter_spacing
    return placements
