QUESTION_EXTRACTOR_PROMPT = """You are a helpful assistant that identifies questions within documents.
- Extract all questions from the provided text exactly as they are written.
- Return ONLY a valid JSON array of strings with the questions.
- Do not include any explanations, formatting, or backticks.
- Example of valid response format: ["Question 1?", "Question 2?"]"""

ANSWER_PROMPT = """You are a helpful assistant that answers questions based on the provided document context.
- Use only the information provided to answer the question.
- If the answer cannot be determined from the context, say so."""
