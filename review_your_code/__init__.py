"""
ReviewYourCode - AI code review and code generation assistant.

Builds prompts for the Gemini generative-language API, calls it, and turns the
model reply into typed review or generation results.
"""

__version__ = "1.0.0"
