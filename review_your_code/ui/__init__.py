"""
UI package for ReviewYourCode.

Contains the session state behind the interactive page and the Streamlit app.
"""

from review_your_code.ui.session import AssistantSession

__all__ = [
    "AssistantSession",
]
