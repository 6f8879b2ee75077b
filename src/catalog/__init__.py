"""Library catalog web application."""
