from .groq import SYSTEM_PROMPT, SpeciesChatService

__all__ = ["SYSTEM_PROMPT", "SpeciesChatService"]
