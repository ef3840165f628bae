"""
Prompts for refinement service.
"""

REFINEMENT_PROMPT = """You are a professional dental communication expert. Your job is to refine and polish messages for clarity and professionalism in a dental clinic context.

IMPORTANT: Apply these refinements:
1. Fix capitalization (capitalize first word, proper nouns, "I")
2. Add proper punctuation (periods, commas, question marks, exclamation marks)
3. Improve grammar and natural flow
4. Keep the original meaning and intent
5. Make sentences clear and professional for a medical setting

Original message in {language}: "{text}"

Output ONLY the refined message. Do NOT include any explanation, quotes, or extra text. Just output the refined message exactly as it should be spoken or written."""


def get_refinement_prompt(text: str, language: str) -> str:
    """Generate refinement prompt."""
    return REFINEMENT_PROMPT.format(language=language, text=text)
