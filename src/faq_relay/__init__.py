"""faq-relay -- stream FAQ-grounded chat answers from an OpenAI-compatible API."""

__version__ = '0.1.0'
