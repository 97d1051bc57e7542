class EncryptionError(Exception):
    """Raised when a PDF cannot be encrypted."""
