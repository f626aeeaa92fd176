"""Prompt building for grounded answers."""

from ragdesk.domain.entities import MatchDocumentResult

CONTEXT_PLACEHOLDER = "{context}"

DEFAULT_SYSTEM_PROMPT = """You are a professional and helpful AI knowledge assistant.
Your task is to answer user queries using ONLY the provided context below.
If the answer is not contained within the context, politely state that you do not have enough information to answer.
STRICTLY avoid hallucinations and outside knowledge.

Context:
{context}"""


def build_context(matches: list[MatchDocumentResult]) -> str:
    """Render matches as numbered context blocks, in the given order."""
    return "\n\n".join(
        f"[{i}] Source: {m.source or 'Unknown'}\nContent: {m.content}"
        for i, m in enumerate(matches, start=1)
    )


def compose_system_prompt(template: str | None, context: str) -> str:
    """Substitute context into the first placeholder of the template."""
    return (template or DEFAULT_SYSTEM_PROMPT).replace(CONTEXT_PLACEHOLDER, context, 1)
