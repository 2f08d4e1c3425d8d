"""Document model, PDF text decoding, XML writing and ZIP packaging for e-book output."""

__version__ = "0.5.0"