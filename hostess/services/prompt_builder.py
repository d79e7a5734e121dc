"""
System instruction builder.

The instruction is derived once from the knowledge record at startup and sent
verbatim with every completion request.
"""

import json

from hostess.config.constants import DEFAULT_ASSISTANT_NAME
from hostess.models.knowledge import KnowledgeRecord

GUIDELINES = (
    "Guidelines:\n"
    "- Speak as if you are a human hostess on the phone.\n"
    "- Keep responses short, friendly, and easy to understand when spoken.\n"
    "- Answer questions about hours, location, parking, menu, and policies using this data.\n"
    "- For reservations, ALWAYS ask for and confirm: name, party size, date, time, and phone number.\n"
    "- Do not mention JSON, internal data, or that you are an AI.\n"
    "- If you don't know something, say you are not sure but keep it confident and helpful.\n"
)


def build_system_instruction(
    knowledge: KnowledgeRecord, assistant_name: str = DEFAULT_ASSISTANT_NAME
) -> str:
    """
    Build the system instruction for the completion model.

    Args:
        knowledge: The loaded restaurant knowledge record
        assistant_name: Name the assistant introduces itself with

    Returns:
        str: Identity statement, the serialized record, and the guidelines
    """
    identity = (
        f"You are {assistant_name}, the phone assistant for {knowledge.name}. "
        "Use the following restaurant information to answer questions accurately:\n\n"
    )
    document = json.dumps(knowledge.as_document(), indent=2, ensure_ascii=False)
    return identity + document + "\n\n" + GUIDELINES
