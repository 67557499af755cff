"""카드 생성 스크립트 — 템플릿과 폰트를 받아 title_card 프리셋을 적용해 PNG로 저장한다."""

import asyncio
import logging

from config import load_config, text_options_from_config
from errors import RenderError
from preset.cards import title_card
from preset.values import ValueBag
from renderer.font import FontHandle
from renderer.image import ImageValue

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(message)s")
logging.getLogger("urllib3").setLevel(logging.WARNING)


async def main():
    config = load_config()
    card = config["card"]
    timeout = config["fetch"].get("timeout_sec", 10)

    # 템플릿과 폰트를 동시에 받는다
    template, font = await asyncio.gather(
        ImageValue.from_network_async(card["template_url"], timeout=timeout),
        FontHandle.from_network_async(card["font_url"], timeout=timeout),
    )

    values = ValueBag.of(
        font=font,
        title=card.get("title", ""),
        tagline=card.get("tagline", ""),
        options=text_options_from_config(config["text"]),
    )
    result = template.load_preset(title_card, values)
    result.save(card.get("output", "out.png"))


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except RenderError as e:
        logging.error("카드 생성 실패: %s", e)
        raise SystemExit(1)
    except KeyboardInterrupt:
        logging.info("종료")
