"""chatgate -- validation and classification of untrusted chat attachments."""

__version__ = "0.3.0"
