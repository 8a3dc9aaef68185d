"""Supplier directories supported by the scraper."""
