"""
Answer generation prompt.

Defines the chat prompt template used to answer questions from retrieved notes.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded answer generation
"""

from langchain_core.prompts import ChatPromptTemplate

SYSTEM_PROMPT = "You are an assistant that answers questions based on the user's notes."

NOTES_QA_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", "Context:\n{context}\n\nQuestion:\n{question}"),
])
