"""Validation engine.

Pipeline, leaves first::

    raw text -> normalizer -> resolver -> matcher -> formatter -> result

Every stage is a pure function of its inputs and the read-only
``MetadataStore``.  ``validator.validate`` composes them.
"""
