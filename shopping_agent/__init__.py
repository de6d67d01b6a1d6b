"""Shopping Agent Package: browser-automation shopping assistant over the Claude Agent SDK.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "0.1.0"
