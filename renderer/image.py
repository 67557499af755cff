"""이미지 값 모듈 — 텍스트/이미지 합성 결과를 새 값으로 돌려주는 RGBA 이미지.

모든 변환은 원본을 건드리지 않고 새 ImageValue를 반환하므로
체인 형태로 이어 쓸 수 있다.

    card = (ImageValue.from_file("template.png")
            .render_text("Hello", 64, 480, 254, font=font)
            .render_text("World", 48, 480, 320, "#fff", font=font))
"""

import logging
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from errors import DecodeError
from net.fetch import fetch_bytes, fetch_bytes_async

from .color import resolve_color
from .compositor import composite_glyphs
from .font import FontHandle
from .layout import Position, TextOptions, layout_glyphs

logger = logging.getLogger(__name__)


class ImageValue:
    """RGBA 이미지 값. 내부 버퍼는 외부에 노출하지 않는다."""

    def __init__(self, image: Image.Image):
        # 호출자의 버퍼와 공유하지 않도록 항상 사본을 둔다
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        else:
            image = image.copy()
        self._image = image

    @classmethod
    def _wrap(cls, image: Image.Image) -> "ImageValue":
        """새로 만든 버퍼를 복사 없이 감싼다 (내부 전용)."""
        value = cls.__new__(cls)
        value._image = image if image.mode == "RGBA" else image.convert("RGBA")
        return value

    # ── 생성 ──

    @classmethod
    def from_bytes(cls, data: bytes) -> "ImageValue":
        """PNG/JPEG 등 이미지 바이트를 디코딩한다."""
        try:
            img = Image.open(BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise DecodeError(f"이미지를 디코딩할 수 없습니다: {e}") from e
        return cls._wrap(img)

    @classmethod
    def from_file(cls, path: str | Path) -> "ImageValue":
        return cls.from_bytes(Path(path).read_bytes())

    @classmethod
    def blank(cls, width: int, height: int, color: tuple = (0, 0, 0, 0)) -> "ImageValue":
        """단색으로 채운 새 이미지."""
        return cls._wrap(Image.new("RGBA", (width, height), color))

    @classmethod
    def from_network(cls, url: str, timeout: float = 10.0) -> "ImageValue":
        img = cls.from_bytes(fetch_bytes(url, timeout=timeout))
        logger.info("이미지 로드: %s (%dx%d)", url, img.width, img.height)
        return img

    @classmethod
    async def from_network_async(cls, url: str, timeout: float = 10.0) -> "ImageValue":
        img = cls.from_bytes(await fetch_bytes_async(url, timeout=timeout))
        logger.info("이미지 로드: %s (%dx%d)", url, img.width, img.height)
        return img

    # ── 조회 ──

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        return self._image.getpixel((x, y))

    def to_pil(self) -> Image.Image:
        """내부 버퍼의 사본을 반환한다."""
        return self._image.copy()

    def __repr__(self) -> str:
        return f"ImageValue({self.width}x{self.height})"

    # ── 변환 ──

    def render_text(
        self,
        text: str,
        scale: float,
        x: float,
        y: float,
        color: str | None = None,
        *,
        font: FontHandle,
        options: TextOptions | None = None,
    ) -> "ImageValue":
        """텍스트를 (x, y)에 그린 새 이미지를 반환한다.

        Args:
            scale: 글자 크기 (px)
            x, y: 텍스트 상자 좌상단
            color: "#RRGGBB" / "#RGB" (None이면 검정)
            font: 사용할 폰트
            options: 글자/공백 간격
        """
        rgb = resolve_color(color)
        placements = layout_glyphs(text, font, scale, Position(x, y), options)
        logger.debug("텍스트 렌더링: %r (%d glyphs, scale=%s)", text, len(placements), scale)
        image = composite_glyphs(self._image.copy(), placements, rgb)
        return ImageValue._wrap(image)

    def overlay(self, other: "ImageValue", x: int, y: int) -> "ImageValue":
        """other를 (x, y)에 알파 합성한 새 이미지를 반환한다. 밖으로 나간 부분은 잘린다.

        투명 캔버스 위에 올리면 보이는 픽셀(alpha > 0)은 원본 그대로지만,
        완전히 투명한 원본 픽셀은 (0, 0, 0, 0)이 된다.
        """
        layer = _place(other._image, self.size, (int(x), int(y)))
        return ImageValue._wrap(Image.alpha_composite(self._image, layer))

    def resize(self, width: int, height: int) -> "ImageValue":
        """bilinear 필터로 크기를 바꾼 새 이미지를 반환한다."""
        if width <= 0 or height <= 0:
            raise ValueError(f"크기는 양수여야 합니다: {width}x{height}")
        return ImageValue._wrap(
            self._image.resize((int(width), int(height)), Image.Resampling.BILINEAR)
        )

    def load_preset(self, preset, values) -> "ImageValue":
        """프리셋을 적용한 새 이미지를 반환한다."""
        from preset.dispatch import apply_preset

        return apply_preset(preset, self, values)

    # ── 출력 ──

    def to_bytes(self) -> bytes:
        """PNG 바이트로 인코딩한다."""
        buf = BytesIO()
        self._image.save(buf, format="PNG")
        return buf.getvalue()

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.write_bytes(self.to_bytes())
        logger.info("저장: %s (%dx%d)", path, self.width, self.height)
        return path


def _place(layer: Image.Image, size: tuple[int, int], position: tuple[int, int]) -> Image.Image:
    """레이어를 size 크기의 투명 캔버스 위 지정 위치에 배치한다."""
    if layer.size == size and position == (0, 0):
        return layer
    result = Image.new("RGBA", size, (0, 0, 0, 0))
    result.paste(layer, position)
    return result
