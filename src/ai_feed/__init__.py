"""AI Content Feed: published content as a flat JSON feed for search/embedding ingestion."""

__version__ = "1.0.0"
