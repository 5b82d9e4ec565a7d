"""HTTP surface for the ingestion core."""
