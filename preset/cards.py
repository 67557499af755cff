"""소셜 카드 프리셋 — 템플릿 이미지 위에 제목과 부제를 그린다."""

from renderer.image import ImageValue
from renderer.layout import TextOptions

from .dispatch import preset
from .values import ValueKind

# 1200x650 카드 템플릿 기준 위치
TITLE_POS = (480.0, 254.0)
TITLE_SCALE = 64.0
TAGLINE_POS = (480.0, 320.0)
TAGLINE_SCALE = 48.0
TAGLINE_COLOR = "#FFFFFF"


@preset(
    font=ValueKind.FONT,
    title=ValueKind.TEXT,
    tagline=ValueKind.TEXT,
    options=ValueKind.OPTIONS,
)
def title_card(img: ImageValue, font, title: str, tagline: str, options: TextOptions) -> ImageValue:
    """제목(검정, 64px)과 부제(흰색, 48px)를 그린다."""
    return (
        img.render_text(title, TITLE_SCALE, *TITLE_POS, font=font, options=options)
        .render_text(tagline, TAGLINE_SCALE, *TAGLINE_POS, TAGLINE_COLOR, font=font, options=options)
    )
