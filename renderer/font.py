"""폰트 모듈 — 폰트 바이트를 로드하고 글자별 커버리지 마스크를 만든다.

래스터화는 Pillow(FreeType), 글리프 보유 여부는 fontTools cmap으로 판단한다.
"""

import functools
import logging
import math
import struct
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Iterator

from fontTools.ttLib import TTFont, TTLibError
from PIL import Image, ImageDraw, ImageFont

from errors import FontParseError
from net.fetch import fetch_bytes, fetch_bytes_async

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphPlacement:
    """절대 좌표에 배치된 글리프 하나.

    mask는 글리프 픽셀 경계 상자 크기의 "L" 이미지이며,
    (left, top)은 그 상자의 좌상단 절대 픽셀 좌표다.
    """
    char: str
    mask: Image.Image
    left: int
    top: int

    @property
    def width(self) -> int:
        return self.mask.width

    @property
    def height(self) -> int:
        return self.mask.height

    @property
    def bbox(self) -> tuple[int, int, int, int]:
        return self.left, self.top, self.left + self.width, self.top + self.height

    def coverage(self, dx: int, dy: int) -> float:
        """로컬 픽셀 (dx, dy)의 커버리지를 0~1 범위로 반환한다."""
        return self.mask.getpixel((dx, dy)) / 255

    def covered(self) -> Iterator[tuple[int, int, float]]:
        """커버리지가 0보다 큰 픽셀의 (dx, dy, alpha)를 순서대로 낸다."""
        data = self.mask.load()
        for dy in range(self.height):
            for dx in range(self.width):
                value = data[dx, dy]
                if value:
                    yield dx, dy, value / 255


class FontHandle:
    """파싱된 폰트 프로그램. 생성 후 변경되지 않으므로 복사 시 자기 자신을 반환한다."""

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._cmap = _read_cmap(self._data)
        self.at_size(12)

    @classmethod
    def from_bytes(cls, data: bytes) -> "FontHandle":
        return cls(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "FontHandle":
        return cls(Path(path).read_bytes())

    @classmethod
    def from_network(cls, url: str, timeout: float = 10.0) -> "FontHandle":
        """URL에서 폰트를 받아온다 (블로킹)."""
        font = cls(fetch_bytes(url, timeout=timeout))
        logger.info("폰트 로드: %s (%d glyphs)", url, len(font._cmap))
        return font

    @classmethod
    async def from_network_async(cls, url: str, timeout: float = 10.0) -> "FontHandle":
        """URL에서 폰트를 받아온다 (asyncio)."""
        font = cls(await fetch_bytes_async(url, timeout=timeout))
        logger.info("폰트 로드: %s (%d glyphs)", url, len(font._cmap))
        return font

    def __copy__(self) -> "FontHandle":
        return self

    def __deepcopy__(self, memo) -> "FontHandle":
        return self

    @property
    def data(self) -> bytes:
        return self._data

    def has_glyph(self, ch: str) -> bool:
        return ord(ch) in self._cmap

    def at_size(self, size: float) -> ImageFont.FreeTypeFont:
        """지정 크기의 FreeTypeFont를 반환한다 (최근 크기 캐싱)."""
        try:
            return _truetype(self._data, float(size))
        except OSError as e:
            raise FontParseError(f"폰트를 열 수 없습니다: {e}") from e

    def ascent(self, scale: float) -> float:
        """기준선까지의 높이(px)."""
        ascent, _ = self.at_size(scale).getmetrics()
        return float(ascent)

    def glyph(self, ch: str, scale: float, x: float, y: float) -> GlyphPlacement | None:
        """기준선 원점 (x, y)에 놓인 글자의 커버리지 마스크를 만든다.

        폰트에 글리프가 없거나 잉크가 없는 글자면 None.
        """
        if not self.has_glyph(ch):
            return None
        font = self.at_size(scale)
        box = font.getbbox(ch, anchor="ls")
        left, top = math.floor(box[0]), math.floor(box[1])
        right, bottom = math.ceil(box[2]), math.ceil(box[3])
        w = right - left
        h = bottom - top
        if w <= 0 or h <= 0:
            return None

        mask = Image.new("L", (w, h), 0)
        draw = ImageDraw.Draw(mask)
        draw.text((-left, -top), ch, font=font, fill=255, anchor="ls")
        return GlyphPlacement(
            char=ch,
            mask=mask,
            left=math.floor(x) + left,
            top=math.floor(y) + top,
        )


def _read_cmap(data: bytes) -> dict[int, str]:
    """폰트의 유니코드 cmap을 읽는다."""
    try:
        # 폰트 컬렉션(.ttc)은 Pillow와 같이 첫 번째 폰트를 쓴다
        font_number = 0 if data[:4] == b"ttcf" else -1
        tt = TTFont(BytesIO(data), lazy=True, fontNumber=font_number)
        cmap = tt.getBestCmap()
        tt.close()
    except (TTLibError, OSError, KeyError, AssertionError, struct.error) as e:
        raise FontParseError(f"폰트 파싱 실패: {e}") from e
    if cmap is None:
        raise FontParseError("유니코드 cmap이 없는 폰트입니다")
    return cmap


# 폰트 바이트와 크기별 FreeTypeFont 캐시 (크기가 계속 바뀌어도 최근 것만 유지)
@functools.lru_cache(maxsize=64)
def _truetype(data: bytes, size: float) -> ImageFont.FreeTypeFont:
    return ImageFont.truetype(BytesIO(data), size)
