import asyncio

from chat_pager import ChatPagerConfig, LoggingPresentation, MessagePager
from chat_pager.logging import configure_logging


# Simple usage - config loaded from .env automatically
async def main() -> None:
    config = ChatPagerConfig()
    configure_logging(config.log_level, json_output=config.log_json)

    presentation = LoggingPresentation()
    async with MessagePager(presentation, config=config) as pager:
        initial = await pager.load_initial()
        print(f"initial: {initial[0].id}..{initial[-1].id}")

        below = await pager.near_bottom(current_max_visible_id=initial[-1].id)
        above = await pager.near_top(current_min_visible_id=initial[0].id)
        print(f"loaded {len(below)} below, {len(above)} above")

        result = await pager.jump_requested()
        print(result.outcome, result.position)

        bounds = pager.coordinator.page_bounds
        print(pager.window.item_count(), bounds.lower_page, bounds.upper_page)


if __name__ == "__main__":
    asyncio.run(main())
