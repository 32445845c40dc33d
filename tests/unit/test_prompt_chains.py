"""Tests for prompt chain builders."""
import pytest

from urlzip.prompts import (
    chain_lang_detect,
    chain_summary_agent_name,
    chain_summary_description,
    chain_summary_tags,
    chain_summary_generation_title,
)


def roles(payload):
    return [message['role'] for message in payload['messages']]


class TestChains:
    """Test suite for the message builders."""

    def test_lang_detect(self):
        payload = chain_lang_detect('bonjour')

        assert roles(payload) == ['system', 'user', 'assistant', 'user', 'assistant', 'user']
        assert payload['messages'][-1]['content'] == '{bonjour}'
        assert payload['messages'][2]['content'] == 'zh-CN'

    def test_summary_agent_name(self):
        payload = chain_summary_agent_name('A helpful translator', 'de-DE')

        assert payload['messages'][0]['role'] == 'system'
        assert payload['messages'][-1] == {
            'content': 'Input: {A helpful translator} [de-DE]',
            'role': 'user',
        }
        assert 'TS Transformer' in [m['content'] for m in payload['messages']]

    def test_summary_description(self):
        """Test the locale reaches the system prompt and temperature is zero."""
        payload = chain_summary_description('Writes SQL', 'fr-FR')

        assert payload['temperature'] == 0
        assert 'target language: fr-FR.' in payload['messages'][0]['content']
        assert '{text as JSON quoted string}' in payload['messages'][0]['content']
        assert payload['messages'][-1]['content'] == '输入: {Writes SQL} [fr-FR]'

    def test_summary_tags(self):
        payload = chain_summary_tags('Cooking assistant', 'en-US')

        assert roles(payload)[-1] == 'user'
        assert payload['messages'][-1]['content'] == '输入: {Cooking assistant} [en-US]'
        assert 'temperature' not in payload

    def test_summary_generation_title(self):
        """Test prompts are numbered in order."""
        payload = chain_summary_generation_title(['a red fox', 'a blue sky'], 'image', 'en-US')

        assert roles(payload) == ['system', 'user']
        assert 'AI image prompt' in payload['messages'][0]['content']
        assert payload['messages'][0]['content'].endswith('the output language is: en-US.')
        assert payload['messages'][1]['content'] == 'Prompt:\n1. a red fox\n2. a blue sky'

    def test_summary_generation_title_rejects_modal(self):
        with pytest.raises(ValueError):
            chain_summary_generation_title(['x'], 'audio', 'en-US')

    def test_deterministic(self):
        assert chain_summary_tags('same', 'en-US') == chain_summary_tags('same', 'en-US')

    @pytest.mark.parametrize("builder", [
        lambda: chain_lang_detect('x'),
        lambda: chain_summary_agent_name('x', 'en-US'),
        lambda: chain_summary_description('x', 'en-US'),
        lambda: chain_summary_tags('x', 'en-US'),
        lambda: chain_summary_generation_title(['x'], 'video', 'en-US'),
    ])
    def test_message_shape(self, builder):
        """Test every message carries a known role and string content."""
        for message in builder()['messages']:
            assert set(message) == {'content', 'role'}
            assert message['role'] in ('system', 'user', 'assistant')
            assert isinstance(message['content'], str)
