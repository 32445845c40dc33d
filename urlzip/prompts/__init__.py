"""Prompt chain builders."""
from .chains import (
    chain_lang_detect,
    chain_summary_agent_name,
    chain_summary_description,
    chain_summary_tags,
    chain_summary_generation_title,
)

__all__ = [
    'chain_lang_detect',
    'chain_summary_agent_name',
    'chain_summary_description',
    'chain_summary_tags',
    'chain_summary_generation_title',
]
