"""픽셀 합성 모듈 — 글리프 커버리지로 단색을 RGBA 버퍼에 알파 블렌딩한다."""

from typing import Iterable

from PIL import Image

from .font import GlyphPlacement


def blend_channel(base: int, overlay: int, alpha: float) -> int:
    value = round(overlay * alpha + base * (1.0 - alpha))
    return min(255, max(0, value))


def blend_pixel(base: tuple, color: tuple[int, int, int], alpha: float) -> tuple[int, int, int, int]:
    """base 픽셀 위에 color를 alpha만큼 섞는다. 결과 알파는 항상 255."""
    return (
        blend_channel(base[0], color[0], alpha),
        blend_channel(base[1], color[1], alpha),
        blend_channel(base[2], color[2], alpha),
        255,
    )


def composite_glyphs(
    image: Image.Image,
    placements: Iterable[GlyphPlacement],
    color: tuple[int, int, int],
) -> Image.Image:
    """글리프들을 순서대로 image에 그린다 (제자리 변경 후 image 반환).

    image는 호출자가 단독으로 소유한 RGBA 버퍼여야 한다.
    버퍼 밖으로 나가는 픽셀은 조용히 잘린다.
    """
    if image.mode != "RGBA":
        raise ValueError(f"RGBA 버퍼가 필요합니다: {image.mode}")
    pixels = image.load()
    width, height = image.size

    for glyph in placements:
        for dx, dy, alpha in glyph.covered():
            x = glyph.left + dx
            y = glyph.top + dy
            if not (0 <= x < width and 0 <= y < height):
                continue
            pixels[x, y] = blend_pixel(pixels[x, y], color, alpha)

    return image
