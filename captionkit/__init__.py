"""captionkit — chat-bubble shaped multi-line captions."""

__version__ = "0.1.0"
