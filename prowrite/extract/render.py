"""
Chat Response Splitter — Break an assistant reply into display blocks.

User messages and replies still streaming are shown verbatim. Finished
assistant replies get their educational sections lifted out; HR docs
replies are additionally split around their document block.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from prowrite.extract.educational import Section, parse_educational_content
from prowrite.extract.hr_document import ParsedHRResponse, is_hr_docs_module, parse_hr_document
from prowrite.schema.models import ModuleType


@dataclass
class ParsedResponse:
    main_content: str
    educational_sections: list[Section] = field(default_factory=list)
    hr_document: Optional[ParsedHRResponse] = None


def parse_chat_response(
    content: str,
    module_type: Union[ModuleType, str, None] = None,
    is_user: bool = False,
    is_streaming: bool = False,
) -> ParsedResponse:
    """
    Split a chat message into main content, sections and document block.

    The document parser runs on the original reply, not on the main content
    left after section extraction.
    """
    if is_user or is_streaming:
        return ParsedResponse(main_content=content)

    parsed = parse_educational_content(content)
    hr_document = parse_hr_document(content) if is_hr_docs_module(module_type) else None

    return ParsedResponse(
        main_content=parsed.main_content,
        educational_sections=parsed.educational_sections,
        hr_document=hr_document,
    )
