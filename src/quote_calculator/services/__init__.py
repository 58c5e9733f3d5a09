"""Services - webhook submission and form state helpers."""
