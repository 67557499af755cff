"""렌더링 예외 모듈 — 디코딩·네트워크·색상·프리셋 오류를 정의한다."""


class RenderError(Exception):
    """이 패키지에서 발생하는 모든 오류의 기반 클래스."""


class DecodeError(RenderError):
    """이미지/폰트 바이트를 해석할 수 없을 때 발생한다."""


class FontParseError(DecodeError):
    """폰트 바이트가 올바른 폰트 프로그램이 아닐 때 발생한다."""


class FetchError(RenderError):
    """네트워크에서 바이트를 가져오지 못했을 때 발생한다 (재시도 없음)."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"가져오기 실패: {url} ({reason})")
        self.url = url
        self.reason = reason


class ParseError(RenderError):
    """16진 색상 문자열에 잘못된 자릿수가 있을 때 발생한다."""

    def __init__(self, value: str):
        super().__init__(f"잘못된 색상 값: {value!r}")
        self.value = value


class PresetError(RenderError):
    """프리셋 인자 바인딩 오류의 기반 클래스."""


class MissingParameterError(PresetError):
    def __init__(self, name: str):
        super().__init__(f"{name} 값이 제공되지 않았습니다")
        self.name = name


class TypeMismatchError(PresetError):
    def __init__(self, name: str, expected: str, found: str):
        super().__init__(f"{name}: 기대한 타입 {expected}, 받은 타입 {found}")
        self.name = name
        self.expected = expected
        self.found = found
