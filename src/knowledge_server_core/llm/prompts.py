"""Prompt templates for question answering."""

SYSTEM_PREAMBLE = (
    "You are an AI assistant for Material and Metallurgical Engineering.\n"
    "Answer clearly, academically, and concisely."
)

QUESTION_PROMPT = """
{preamble}

Context:
{context}

Question:
{question}
"""

CONTEXT_SEPARATOR = "\n\n"


def build_prompt(contents, question: str) -> str:
    """Concatenate every stored knowledge entry into the prompt context"""
    context = CONTEXT_SEPARATOR.join(contents)
    return QUESTION_PROMPT.format(preamble=SYSTEM_PREAMBLE, context=context, question=question)
