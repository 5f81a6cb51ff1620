"""
Processing stages: ingestion, cursor, inline translation, metadata and
segmentation.
"""
