"""Unit tests for the synthetic message backend."""

import pytest

from chat_pager.config import SourceSettings
from chat_pager.errors import InvalidRange
from chat_pager.infra.synthetic.generator import (
    LONG_MESSAGE_EVERY,
    generate_messages,
    message_text,
)
from chat_pager.infra.synthetic.source import SyntheticMessageSource
from chat_pager.interfaces.source import MessageSourceInterface


class TestGenerator:
    """Tests for deterministic message generation."""

    def test_generates_contiguous_ascending_run(self) -> None:
        messages = generate_messages(990, 21)

        assert [m.id for m in messages] == list(range(990, 1011))

    def test_generation_is_deterministic(self) -> None:
        first = generate_messages(1, 40)
        second = generate_messages(1, 40)

        assert [m.text for m in first] == [m.text for m in second]

    def test_every_nineteenth_message_is_long(self) -> None:
        assert "\n" in message_text(LONG_MESSAGE_EVERY)
        assert "\n" in message_text(LONG_MESSAGE_EVERY * 3)
        assert message_text(20) == "Sample message 20"

    def test_negative_ids(self) -> None:
        assert [m.id for m in generate_messages(-19, 20)][0] == -19

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_count_rejected(self, count: int) -> None:
        with pytest.raises(InvalidRange):
            generate_messages(1, count)


class TestSyntheticMessageSource:
    """Tests for SyntheticMessageSource."""

    @pytest.mark.asyncio
    async def test_fetch_full_range(self, instant_source: SyntheticMessageSource) -> None:
        messages = await instant_source.fetch(21, 20)

        assert [m.id for m in messages] == list(range(21, 41))
        assert instant_source.fetch_count == 1

    @pytest.mark.asyncio
    async def test_fetch_clipped_to_history(self) -> None:
        source = SyntheticMessageSource(SourceSettings(latency=0, min_id=1, max_id=995))

        assert [m.id for m in await source.fetch(990, 21)] == list(range(990, 996))
        assert await source.fetch(-19, 20) == []
        assert [m.id for m in await source.fetch(-4, 10)] == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_fetch_outside_history_is_empty(self) -> None:
        source = SyntheticMessageSource(SourceSettings(latency=0, max_id=500))

        assert await source.fetch(990, 21) == []
        assert source.fetch_count == 1

    @pytest.mark.asyncio
    async def test_fetch_rejects_non_positive_count(
        self,
        instant_source: SyntheticMessageSource,
    ) -> None:
        with pytest.raises(InvalidRange):
            await instant_source.fetch(1, 0)

    @pytest.mark.asyncio
    async def test_from_config(self) -> None:
        source = await SyntheticMessageSource.from_config(SourceSettings(latency=0, max_id=10))

        assert len(await source.fetch(1, 20)) == 10

    @pytest.mark.asyncio
    async def test_from_dict(self) -> None:
        source = await SyntheticMessageSource.from_dict({"latency": 0, "min_id": 5})

        assert [m.id for m in await source.fetch(1, 6)] == [5, 6]
        await source.close()

    def test_satisfies_interface(self, instant_source: SyntheticMessageSource) -> None:
        assert isinstance(instant_source, MessageSourceInterface)
        assert SyntheticMessageSource.config_class is SourceSettings
