"""Prompt augmentation for retrieval-augmented answers."""

from faqchat.conf.prompts import AUGMENTED_PROMPT_TEMPLATE, RAG_SYSTEM_PROMPT
from faqchat.src.data_classes import RetrievalResult


def build_augmented_prompt(query: str, retrieval: RetrievalResult) -> str:
    """Combine the fixed instruction, the retrieved context and the user query.

    Args:
        query: The user's query, used verbatim apart from surrounding whitespace
        retrieval: Entries retrieved for the query

    Returns:
        The complete prompt for the LLM
    """
    return AUGMENTED_PROMPT_TEMPLATE.format(
        instruction=RAG_SYSTEM_PROMPT,
        context=retrieval.to_context(),
        query=query.strip(),
    )
