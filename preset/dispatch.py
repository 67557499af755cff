"""프리셋 모듈 — 재사용 가능한 렌더링 함수를 값 묶음과 결합해 실행한다."""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from renderer.image import ImageValue

from .values import ValueBag, ValueKind

logger = logging.getLogger(__name__)

PresetCallback = Callable[[ImageValue, ValueBag], ImageValue]


@dataclass(frozen=True)
class Preset:
    callback: PresetCallback
    name: str = "preset"


def define_preset(callback: PresetCallback, name: str | None = None) -> Preset:
    return Preset(callback, name or getattr(callback, "__name__", "preset"))


def apply_preset(preset: Preset, image: ImageValue, values: ValueBag | Mapping[str, Any]) -> ImageValue:
    """프리셋 콜백을 한 번 실행하고 그 결과 이미지를 반환한다.

    인자 바인딩 오류(MissingParameterError, TypeMismatchError)는 그대로 전달된다.
    """
    if not isinstance(values, ValueBag):
        values = ValueBag(values)
    logger.debug("프리셋 적용: %s %r", preset.name, values)
    result = preset.callback(image, values)
    if not isinstance(result, ImageValue):
        raise TypeError(
            f"프리셋 {preset.name}이(가) ImageValue 대신 {type(result).__name__}을(를) 반환했습니다"
        )
    return result


def preset(**params: ValueKind) -> Callable[[Callable[..., ImageValue]], Preset]:
    """선언한 인자를 타입 검사해 키워드로 넘기는 프리셋을 만든다.

        @preset(font=ValueKind.FONT, title=ValueKind.TEXT)
        def banner(img, font, title):
            return img.render_text(title, 64, 40, 40, font=font)
    """
    def decorator(fn: Callable[..., ImageValue]) -> Preset:
        @functools.wraps(fn)
        def callback(image: ImageValue, values: ValueBag) -> ImageValue:
            bound = {name: values.require(name, kind) for name, kind in params.items()}
            return fn(image, **bound)

        return define_preset(callback, fn.__name__)

    return decorator
