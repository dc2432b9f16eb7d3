"""Numbering-plan metadata package.

Per-region rules (lengths, patterns, format templates, prefixes) loaded
from ``phonecheck/metadata/data/*.yaml`` into an immutable
``MetadataStore``.  The store is built once per process and shared by
every validation call.
"""
