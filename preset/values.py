"""프리셋 값 모듈 — 타입 태그가 붙은 값과 이름→값 묶음(ValueBag)."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Mapping

from errors import MissingParameterError, TypeMismatchError
from renderer.font import FontHandle
from renderer.image import ImageValue
from renderer.layout import TextOptions


class ValueKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    COLOR = "color"
    BOOL = "bool"
    FONT = "font"
    IMAGE = "image"
    OPTIONS = "options"


@dataclass(frozen=True)
class Value:
    """타입 태그(kind)와 실제 값(payload)."""
    kind: ValueKind
    payload: Any

    @classmethod
    def text(cls, value: str) -> "Value":
        return cls(ValueKind.TEXT, value)

    @classmethod
    def number(cls, value: float) -> "Value":
        return cls(ValueKind.NUMBER, value)

    @classmethod
    def color(cls, value: str) -> "Value":
        """색상 문자열 ("#RRGGBB"). 일반 텍스트와 구분하려면 이 생성자를 쓴다."""
        return cls(ValueKind.COLOR, value)

    @classmethod
    def flag(cls, value: bool) -> "Value":
        return cls(ValueKind.BOOL, value)

    @classmethod
    def font(cls, value: FontHandle) -> "Value":
        return cls(ValueKind.FONT, value)

    @classmethod
    def image(cls, value: ImageValue) -> "Value":
        return cls(ValueKind.IMAGE, value)

    @classmethod
    def options(cls, value: TextOptions) -> "Value":
        return cls(ValueKind.OPTIONS, value)

    @classmethod
    def infer(cls, obj: Any) -> "Value":
        """파이썬 객체의 타입으로 태그를 정한다."""
        if isinstance(obj, Value):
            return obj
        # bool은 int의 하위 타입이므로 먼저 확인
        if isinstance(obj, bool):
            return cls.flag(obj)
        if isinstance(obj, (int, float)):
            return cls.number(obj)
        if isinstance(obj, str):
            return cls.text(obj)
        if isinstance(obj, FontHandle):
            return cls.font(obj)
        if isinstance(obj, ImageValue):
            return cls.image(obj)
        if isinstance(obj, TextOptions):
            return cls.options(obj)
        raise TypeError(f"지원하지 않는 값 타입: {type(obj).__name__}")


class ValueBag:
    """프리셋에 넘기는 이름→Value 묶음. 읽지 않은 키는 무시된다."""

    def __init__(self, values: "Mapping[str, Any] | ValueBag | None" = None):
        if isinstance(values, ValueBag):
            self._values: dict[str, Value] = dict(values._values)
            return
        self._values = {
            name: Value.infer(value) for name, value in (values or {}).items()
        }

    @classmethod
    def of(cls, **values: Any) -> "ValueBag":
        return cls(values)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{k}: {v.kind.value}" for k, v in self._values.items())
        return f"ValueBag({{{items}}})"

    def keys(self) -> list[str]:
        return list(self._values)

    def kind_of(self, name: str) -> ValueKind | None:
        value = self._values.get(name)
        return value.kind if value else None

    def require(self, name: str, kind: ValueKind) -> Any:
        """name의 값을 kind로 꺼낸다.

        Raises:
            MissingParameterError: 값이 없을 때
            TypeMismatchError: 태그가 kind와 다를 때
        """
        value = self._values.get(name)
        if value is None:
            raise MissingParameterError(name)
        if value.kind is not kind:
            raise TypeMismatchError(name, kind.value, value.kind.value)
        return value.payload

    def get(self, name: str, kind: ValueKind, default: Any = None) -> Any:
        """값이 없으면 default. 있는데 태그가 다르면 TypeMismatchError."""
        if name not in self._values:
            return default
        return self.require(name, kind)
