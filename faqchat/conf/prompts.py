"""Prompts and fixed texts used throughout the application."""

# Instruction placed in front of every augmented prompt
RAG_SYSTEM_PROMPT: str = """You are a helpful customer support chatbot for a company. Your answers MUST be based ONLY on the provided context from our company's FAQs. Do not use outside knowledge.
If the context does not contain the answer, state clearly and politely that you cannot find the relevant information in the company documents."""

AUGMENTED_PROMPT_TEMPLATE: str = """{instruction}

CONTEXT:
---
{context}
---

CUSTOMER QUERY: {query}"""

# Context rendering
FAQ_DOCUMENT_TEMPLATE: str = "FAQ Document {index}:\nQ: {question}\nA: {answer}"
FAQ_DOCUMENT_SEPARATOR: str = "\n---\n"
NO_DOCUMENTS_FOUND: str = (
    "No specific FAQ documents found in the database that match the query."
)

# Chat client texts
CHAT_GREETING: str = (
    "Hello! I'm the CIMBA Support Chatbot. Ask me a question about our policies, "
    "hours, or the internship project requirements, and I'll check our internal FAQs."
)
CHAT_APOLOGY: str = (
    "Sorry, I couldn't connect to the support server. Please ensure the backend "
    "is running and try again in a moment."
)
