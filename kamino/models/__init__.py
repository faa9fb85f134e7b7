"""Data models for kamino."""
