"""Core transcoding modules.

WHY: The core package holds everything with real behavior: the lookup
table, the convertibility policy, the streaming tokenizer and the
encoder that ties them together. The CLI and the one-shot helper are
thin wrappers around it.

HOW: table.py is pure data, policy.py filters characters, tokenizer.py
finds word boundaries in a byte buffer, encoder.py owns the buffers and
cross-call state.

RULES:
- No module here touches stdin/stdout or configures logging
- tokenizer.scan_word stays a pure function; all state lives in Encoder
"""
