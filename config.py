"""설정 파일 로더 모듈."""

import copy
import json
from pathlib import Path

from renderer.layout import TextOptions

# 기본 설정 경로
_CONFIG_PATH = Path(__file__).parent / "config.json"

# 기본값 — config.json에 누락된 키가 있을 때 사용
_DEFAULTS = {
    "text": {
        "letter_spacing": 2.0,
        "space_width": 10.0,
    },
    "fetch": {
        "timeout_sec": 10,
    },
    "card": {
        "template_url": "https://res.cloudinary.com/zype/image/upload/w_1200,h_650/CodeWithR/Template.png",
        "font_url": "https://github.com/Zype-Z/ShareImage.js/raw/main/assets/fonts/sirin-stencil.ttf",
        "title": "Hello, World!",
        "tagline": "Cool!",
        "output": "out.png",
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """base 딕셔너리에 override 값을 병합한다 (깊은 병합)."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict:
    """설정 파일을 읽어 딕셔너리로 반환한다.

    파일이 없으면 기본값을 사용한다.
    """
    config_path = path or _CONFIG_PATH
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            user_config = json.load(f)
        return _deep_merge(copy.deepcopy(_DEFAULTS), user_config)
    return copy.deepcopy(_DEFAULTS)


def text_options_from_config(section: dict) -> TextOptions:
    """설정의 text 섹션으로 TextOptions를 만든다."""
    return TextOptions(
        letter_spacing=float(section.get("letter_spacing", 2.0)),
        space_width=float(section.get("space_width", 10.0)),
    )
