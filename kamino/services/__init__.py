"""Services for kamino."""
