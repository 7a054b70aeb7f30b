"""NiceGUI interface - thin visualization layer over the Q&A session.

Responsibilities:
    - PDF selection and upload form
    - Question form with busy feedback
    - Shared error banner and answer display

Contains no business logic. Delegates all operations to the session
and only renders its state.
"""
