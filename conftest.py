"""공용 pytest 픽스처 — Pillow 내장 FreeType 폰트와 기본 이미지."""

import pytest
from PIL import ImageFont

from renderer.font import FontHandle
from renderer.image import ImageValue


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    """Pillow에 내장된 기본 TrueType 폰트(Aileron) 바이트."""
    default = ImageFont.load_default(size=12)
    data = getattr(default, "font_bytes", None)
    if not data:
        pytest.skip("FreeType 지원 Pillow가 아니어서 내장 폰트를 쓸 수 없음")
    return data


@pytest.fixture(scope="session")
def font(font_bytes) -> FontHandle:
    return FontHandle.from_bytes(font_bytes)


@pytest.fixture
def white_image() -> ImageValue:
    return ImageValue.blank(100, 100, (255, 255, 255, 255))
