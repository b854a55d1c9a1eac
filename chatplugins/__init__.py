"""Rules, storage and text for group-chat bot features: sign-in scores, sleep tracking, tarot, reply thesaurus, local pictures, reincarnation and small parsers."""

__version__ = "0.1.0"