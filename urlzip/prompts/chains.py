"""
Prompt chains.

Builders that assemble fixed few-shot message sequences for a chat
model call. Each returns a partial chat payload:
``{'messages': [{'content': ..., 'role': ...}, ...]}``.
"""
from typing import Any, Dict, List, Literal, Sequence

Modal = Literal['image', 'video']

# Shared few-shot inputs
_NAMING_EXAMPLE = (
    'Input: {You are a copywriting master who helps me name design/art works. '
    'The names need to have literary connotation, focus on conciseness and artistic '
    'conception, express the atmosphere and mood of the work, making the name both '
    'concise and poetic.} [zh-CN]'
)
_BUSINESS_PLAN_EXAMPLE = (
    'Input: {You are a business plan writing expert who can provide plan generation '
    'including creative names, short slogans, target user personas, user pain points, '
    'main value propositions, sales/marketing channels, revenue streams, cost '
    'structures, etc.} [%s]'
)


def _message(role: str, content: str) -> Dict[str, str]:
    return {'content': content, 'role': role}


def chain_lang_detect(content: str) -> Dict[str, Any]:
    """Detect the locale of the user's text."""
    return {
        'messages': [
            _message(
                'system',
                'You are a language expert proficient in all world languages. You need to '
                'identify the language of the user input and output it in the international '
                'standard locale format.'
            ),
            _message('user', '{你好}'),
            _message('assistant', 'zh-CN'),
            _message('user', '{hello}'),
            _message('assistant', 'en-US'),
            _message('user', f'{{{content}}}'),
        ],
    }


def chain_summary_agent_name(content: str, locale: str) -> Dict[str, Any]:
    """Summarize an agent description into a short role name."""
    return {
        'messages': [
            _message(
                'system',
                "You are a naming expert skilled at creating concise, meaningful names with "
                "literary depth and artistic conception. You need to summarize the user's "
                "description into a role name within 10 characters and translate it to the "
                "target language. Format requirements:\nInput: {text as JSON quoted string} "
                "[locale]\nOutput: {role name}"
            ),
            _message('user', _NAMING_EXAMPLE),
            _message(
                'user',
                'Input: {You are a UX Writer skilled at transforming plain descriptions into '
                'refined expressions. Next, the user will input a text, and you need to convert '
                'it into a better expression, with a length not exceeding 40 characters.} [ru-RU]'
            ),
            _message('assistant', 'Творческий редактор UX'),
            _message(
                'user',
                'Input: {You are a frontend code expert. Please convert the code below to TS '
                'without modifying the implementation. If there are global variables not '
                'defined in the original JS, you need to add type declarations using declare.} '
                '[en-US]'
            ),
            _message('assistant', 'TS Transformer'),
            _message(
                'user',
                "Input: {Improve my English language use by replacing basic A0-level expressions "
                "with more sophisticated, advanced-level phrases while maintaining the "
                "conversation's essence. Your responses should focus solely on corrections and "
                "enhancements, avoiding additional explanations.} [zh-CN]"
            ),
            _message('assistant', 'Email Optimization Assistant'),
            _message('user', f'Input: {{{content}}} [{locale}]'),
        ],
    }


def chain_summary_description(content: str, locale: str) -> Dict[str, Any]:
    """Summarize an agent description into a skill profile."""
    return {
        'messages': [
            _message(
                'system',
                "You are an assistant skilled at summarizing skills. You need to summarize the "
                "user's input into a role skill profile within 20 characters. The content should "
                "ensure clear information, logical clarity, and effectively convey the role's "
                "skills and experience, and translate it to the target language: "
                f"{locale}. Format requirements:\nInput: {{text as JSON quoted string}} "
                "[locale]\nOutput: {profile}"
            ),
            _message('user', _NAMING_EXAMPLE),
            _message('assistant', 'Good at naming creative art works'),
            _message('user', _BUSINESS_PLAN_EXAMPLE % 'en-US'),
            _message('assistant', 'Good at business plan writing and consulting'),
            _message(
                'user',
                'Input: {You are a frontend expert. Please convert the code below to TS without '
                'modifying the implementation. If there are global variables not defined in the '
                'original JS, you need to add type declarations using declare.} [zh-CN]'
            ),
            _message('assistant', 'Good at TS conversion and type declaration'),
            _message(
                'user',
                'Input: {\nWrite user documentation for developers on API usage in a normal '
                'manner. You need to provide easy-to-use and readable documentation content from '
                "the user's perspective.\n\nAn example of a standard API documentation is as "
                'follows:\n\n```markdown\n---\ntitle: useWatchPluginMessage\ndescription: Listen '
                'for plugin messages from LobeChat\nnav: API\n---\n\n`useWatchPluginMessage` is '
                'a React Hook encapsulated by the Chat Plugin SDK for listening to plugin '
                'messages sent from LobeChat.\n} [ru-RU]'
            ),
            _message(
                'assistant',
                'Специализируется на создании хорошо структурированной и профессиональной '
                'документации README для GitHub с точными техническими терминами'
            ),
            _message('user', _BUSINESS_PLAN_EXAMPLE % 'zh-CN'),
            _message('assistant', 'Good at business plan writing and consulting'),
            _message('user', f'输入: {{{content}}} [{locale}]'),
        ],
        'temperature': 0,
    }


def chain_summary_tags(content: str, locale: str) -> Dict[str, Any]:
    """Extract up to five classification tags."""
    return {
        'messages': [
            _message(
                'system',
                "You are an assistant skilled at summarizing conversation tags. You need to "
                "extract classification tags from the user's input, separated by `,`, no more "
                "than 5 tags, and translate them to the target language. Format requirements:"
                "\nInput: {text as JSON quoted string} [locale]\nOutput: {tags}"
            ),
            _message('user', _NAMING_EXAMPLE),
            _message('assistant', 'naming,writing,creativity'),
            _message(
                'user',
                'Input: {You are a professional translator proficient in Simplified Chinese, and '
                'have participated in the translation work of the Chinese versions of The New '
                'York Times and The Economist. Therefore, you have a deep understanding of '
                'translating news and current affairs articles. I hope you can help me translate '
                'the following English news paragraphs into Chinese, with a style similar to the '
                'Chinese versions of the aforementioned magazines.} [zh-CN]'
            ),
            _message('assistant', 'translation,writing,copywriting'),
            _message('user', _BUSINESS_PLAN_EXAMPLE % 'en-US'),
            _message('assistant', 'entrepreneurship,planning,consulting'),
            _message('user', f'输入: {{{content}}} [{locale}]'),
        ],
    }


def chain_summary_generation_title(
    prompts: Sequence[str],
    modal: Modal,
    locale: str
) -> Dict[str, Any]:
    """
    Summarize generation prompts into a short title.

    Args:
        prompts: Prompts of one generation batch, numbered in order
        modal: 'image' or 'video'
        locale: Output language

    Raises:
        ValueError: If modal is not supported
    """
    if modal not in ('image', 'video'):
        raise ValueError(f"Unsupported modal: {modal!r}")

    formatted: List[str] = [f"{index}. {prompt}" for index, prompt in enumerate(prompts, 1)]
    return {
        'messages': [
            _message(
                'system',
                f'You are a senior AI art creator and language master. You need to summarize a '
                f'title based on the AI {modal} prompt provided by the user. This title should '
                f'concisely describe the core content of the creation and will be used to '
                f'identify and manage this series of works. The word count should be limited to '
                f'within 10 characters, no punctuation is needed, and the output language is: '
                f'{locale}.'
            ),
            _message('user', 'Prompt:\n' + '\n'.join(formatted)),
        ],
    }
