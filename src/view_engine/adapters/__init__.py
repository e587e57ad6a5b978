"""Host adapters driving the engine (raw terminal, Textual)."""
