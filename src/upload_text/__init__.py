# src/upload_text/__init__.py
"""
Upload Text Lambda

Validates a short text payload and stores it as an object in S3.
"""

__version__ = "1.0.0"
