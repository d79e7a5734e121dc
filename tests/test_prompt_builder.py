import json

from hostess.models.knowledge import KnowledgeRecord
from hostess.services.prompt_builder import GUIDELINES, build_system_instruction


def test_instruction_names_assistant_and_business():
    record = KnowledgeRecord(name="Luna Bistro", hours="5pm-10pm")

    instruction = build_system_instruction(record)

    assert instruction.startswith(
        "You are Agentic Hostess, the phone assistant for Luna Bistro."
    )


def test_instruction_embeds_full_record():
    record = KnowledgeRecord(
        name="Luna Bistro",
        hours="5pm-10pm",
        menu={"mains": ["Lobster linguine"]},
    )

    instruction = build_system_instruction(record)

    assert json.dumps(record.as_document(), indent=2, ensure_ascii=False) in instruction
    assert '"Lobster linguine"' in instruction


def test_instruction_ends_with_guidelines():
    instruction = build_system_instruction(KnowledgeRecord())

    assert instruction.endswith(GUIDELINES)
    for phrase in ("name, party size, date, time, and phone number", "that you are an AI"):
        assert phrase in instruction


def test_custom_assistant_name():
    instruction = build_system_instruction(KnowledgeRecord(name="Luna Bistro"), "Stella")
    assert instruction.startswith("You are Stella, the phone assistant for Luna Bistro.")


def test_instruction_is_deterministic():
    record = KnowledgeRecord(name="Café Luna", hours="5pm-10pm")
    assert build_system_instruction(record) == build_system_instruction(record)
    assert "Café Luna" in build_system_instruction(record)


def test_instruction_serializes_keys_in_given_order():
    record = KnowledgeRecord(hours="5pm-10pm", name="Luna Bistro")

    instruction = build_system_instruction(record)

    assert instruction.index('"hours"') < instruction.index('"name"')
