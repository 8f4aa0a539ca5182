"""UI configuration constants.

Centralizes display strings and formats for the UI module.
"""

# Shown in place of an answer while a turn is in flight
TYPING_PLACEHOLDER = "Analyzing your data..."

# Shown when the chat history is empty
EMPTY_CHAT_TEXT = "Load a CSV file with Ctrl+O, then ask questions about your data."
EMPTY_CHAT_WITH_CSV_TEXT = "Ask questions about your CSV data."

# Input placeholders
INPUT_PLACEHOLDER = "Ask a question about your data (Ctrl+J to send)"
INPUT_DISABLED_PLACEHOLDER = "Load a CSV file to start chatting"

# Header labels
USER_LABEL = "You"
ASSISTANT_LABEL = "Assistant"

# Key used for the typing placeholder row (real rows use message timestamps)
PENDING_KEY = "pending"

# Theme name registered by the app
THEME_NAME = "csvchat-dark"
