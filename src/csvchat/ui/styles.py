"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: status line on top, chat history filling the middle, input bar at
the bottom.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   CSV Status Line
   ============================================ */
#csv-status {
    height: 1;
    padding: 0 2;
    background: $surface;
    color: $text-muted;

    &.loaded {
        color: $foreground;
    }
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $primary;
    }

    &:focus-within {
        border: round $primary-lighten-1;
    }
}

#chat-empty {
    width: 100%;
    height: auto;
    padding: 2 0;
    text-align: center;
    color: $text-muted;
}

/* ============================================
   Chat Input Bar
   ============================================ */
#bottom-bar {
    height: auto;
    padding: 0 1 1 1;
    background: $panel;
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }

    &:disabled {
        border: round $border;
        opacity: 60%;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;

    &:focus {
        background: transparent;
    }
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:hover {
        background: $success-lighten-1;
        border: tall $success-lighten-1;
    }

    &:focus {
        background: $success-lighten-2;
        border: tall $success-lighten-2;
        text-style: bold reverse;
    }
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    border: none;
    background: transparent;
}

.user-message {
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
    }

    &:hover {
        background: $success 12%;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
    }

    &:hover {
        background: $secondary 12%;
    }
}

.pending-message {
    border-left: tall $secondary 50%;
}

.message-header {
    height: auto;
    padding: 0;
}

.message-content {
    height: auto;
    padding: 0;
    margin: 0;
    color: $foreground;
}

.typing {
    color: $text-muted;
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
        background: $primary 12%;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
    }
}
"""
