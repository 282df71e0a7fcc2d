"""Synthetic message backend for chat_pager."""

from chat_pager.infra.synthetic.generator import generate_messages
from chat_pager.infra.synthetic.source import SyntheticMessageSource

__all__ = ["SyntheticMessageSource", "generate_messages"]
