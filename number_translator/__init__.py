"""
Number Translator: Strict conversion of spelled-out English integers.

Architecture: Sanitize → Tokenize → Classify → Validate → Evaluate
Philosophy:  Reject a malformed phrase with a precise reason. Never guess.
"""

__version__ = "1.0.0"
