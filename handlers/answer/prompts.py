from __future__ import annotations


def answer_prompt(text: str) -> str:
    return (
        "Please provide a concise response to this, keeping it short but show your "
        "calculations (in LaTeX) and answer in the same language as the input: "
        f"{text}"
    )
