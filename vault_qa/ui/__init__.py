"""NiceGUI interface - thin visualization layer for questions and uploads.

Responsibilities:
    - Question input with Ctrl+Enter shortcut and answer display
    - Collapsible context snippets under each answer
    - Drag-and-drop document upload for admins, FAQ list for everyone else

Contains no answering or indexing logic. Delegates all operations to the
external API through vault_qa.client.
"""
